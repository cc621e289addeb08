# spendlite/core/dates.py
"""
Date parsing for bank exports.

Bank CSVs disagree on date formats, so parse_date runs a fixed list of
strategies and takes the first one that produces a date:

  1. a generic parse (ISO-8601, "5 Mar 2024", "March 5, 2024", ...)
  2. numeric A/B/YYYY, resolving day vs month
  3. "10:30 am Tue 5 March, 2024" style timestamps

Each strategy returns a date or None. Numeric A/B/YYYY strings are left to
strategy 2 so the day/month guess only happens in one place.
"""
import re
from datetime import date, datetime
from typing import Optional

import pandas as pd

_DIGIT_RUN = re.compile(r"\d+")
_YEAR = re.compile(r"\d{4}")
_NUMERIC_DATE = re.compile(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})$")
_TIME_PREFIX = re.compile(r"^\d{1,2}:\d{2}\s*(am|pm)\s*", re.I)
_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
)
_WRITTEN_DATE = re.compile(
    r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun)?\s*(\d{1,2})\s+(" + "|".join(_MONTH_NAMES) + r"),?\s+(\d{4})",
    re.I,
)

ALL_MONTHS = "All months"
MIN_YEAR = 1900


def _safe_date(year, month, day) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_generic(text: str) -> Optional[date]:
    if _NUMERIC_DATE.match(text):
        return None
    # pandas fills in missing parts, so insist on a 4-digit year and a day
    if not _YEAR.search(text) or len(_DIGIT_RUN.findall(text)) < 2:
        return None
    ts = pd.to_datetime(text, errors="coerce", format="mixed")
    if pd.isna(ts) or ts.year < MIN_YEAR:
        return None
    return ts.date()


def parse_numeric(text: str) -> Optional[date]:
    m = _NUMERIC_DATE.match(text)
    if not m:
        return None
    a, b, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if a > 12:
        day, month = a, b
    elif b > 12:
        day, month = b, a
    else:
        day, month = a, b
    return _safe_date(year, month, day)


def parse_written(text: str) -> Optional[date]:
    m = _WRITTEN_DATE.match(_TIME_PREFIX.sub("", text))
    if not m:
        return None
    month = _MONTH_NAMES.index(m.group(3).lower()) + 1
    return _safe_date(int(m.group(4)), month, int(m.group(2)))


STRATEGIES = (parse_generic, parse_numeric, parse_written)


def parse_date(raw) -> Optional[date]:
    """Return the calendar date in raw, or None if no strategy understands it."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    for strategy in STRATEGIES:
        d = strategy(text)
        if d is not None:
            return d
    return None


def month_key(d: date) -> str:
    return d.strftime("%Y-%m")


def month_key_for(raw) -> Optional[str]:
    d = parse_date(raw)
    return month_key(d) if d else None


def month_label(key: Optional[str]) -> str:
    """'2024-03' -> 'March 2024'."""
    if not key:
        return ALL_MONTHS
    try:
        return datetime.strptime(key, "%Y-%m").strftime("%B %Y")
    except ValueError:
        return str(key)


def friendly_month(label: Optional[str]) -> str:
    if not label:
        return ALL_MONTHS
    if re.match(r"^\d{4}-\d{2}$", label):
        return month_label(label)
    return str(label)
