# spendlite/core/rules.py
import re
from typing import List

from spendlite.core.models import Rule

_LINE_BREAK = re.compile(r"\r?\n")
_SEPARATOR = re.compile(r"=>", re.I)


def parse_rules(text) -> List[Rule]:
    """
    Parse rule text into an ordered list of Rule.

    One rule per line as ``keyword => CATEGORY``. Blank lines and lines
    starting with '#' are ignored, as are lines without a separator or with
    an empty keyword or category. Earlier rules win over later ones.
    """
    rules = []
    for line in _LINE_BREAK.split(str(text or "")):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = _SEPARATOR.split(stripped)
        if len(parts) < 2:
            continue
        keyword = parts[0].strip().lower()
        category = parts[1].strip().upper()
        if keyword and category:
            rules.append(Rule(keyword=keyword, category=category))
    return rules


def matches_keyword(description_lower: str, keyword_lower: str) -> bool:
    """
    True when every whitespace-separated token of the keyword occurs in the
    description, in order. "paypal pypl" matches "paypal *pypl inc" but not
    "pypl paypal".
    """
    tokens = (keyword_lower or "").split()
    if not tokens:
        return False
    pos = 0
    for token in tokens:
        i = description_lower.find(token, pos)
        if i == -1:
            return False
        pos = i + len(token)
    return True
