# spendlite/core/amounts.py
import re
from typing import Optional

# Regex to strip everything except digits, minus, comma and dot
_CLEAN_AMOUNT = re.compile(r"[^\d\-,.]")


def try_parse_amount(raw) -> Optional[float]:
    """Return the signed amount in raw, or None when it does not parse."""
    if raw is None:
        return None
    cleaned = _CLEAN_AMOUNT.sub("", str(raw)).replace(",", "")
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_amount(raw) -> float:
    amount = try_parse_amount(raw)
    return 0.0 if amount is None else amount
