# spendlite/core/columns.py
from typing import Optional, Sequence

from spendlite.core.models import ColumnMap

DATE_HEADERS = ("effective date", "date", "transaction date")
AMOUNT_HEADERS = ("debit", "amount", "debit amount")
DESCRIPTION_HEADERS = ("long description", "description", "narrative", "details")

# Layout of the Qudos Bank export, used when the header row is unrecognised.
FALLBACK_COLUMNS = ColumnMap(date=2, amount=5, description=9)


def _find(header, candidates) -> Optional[int]:
    for cand in candidates:
        if cand in header:
            return header.index(cand)
    return None


def detect_columns(header_row: Optional[Sequence[str]]) -> ColumnMap:
    """
    Work out which cells of a row hold the date, amount and description.
    Falls back to FALLBACK_COLUMNS unless all three are found by name.
    """
    header = [str(c or "").strip().lower() for c in (header_row or [])]
    date_idx = _find(header, DATE_HEADERS)
    amount_idx = _find(header, AMOUNT_HEADERS)
    desc_idx = _find(header, DESCRIPTION_HEADERS)
    if date_idx is None or amount_idx is None or desc_idx is None:
        return FALLBACK_COLUMNS
    return ColumnMap(date=date_idx, amount=amount_idx, description=desc_idx)
