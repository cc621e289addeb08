from itertools import permutations

from spendlite.core.columns import FALLBACK_COLUMNS, detect_columns
from spendlite.core.models import ColumnMap


def test_detect_columns_any_order():
    names = ["Effective Date", "Debit", "Long Description"]
    for header in permutations(names):
        cols = detect_columns(list(header))
        assert cols.date == header.index("Effective Date")
        assert cols.amount == header.index("Debit")
        assert cols.description == header.index("Long Description")


def test_detect_columns_normalises_and_prefers_earlier_candidates():
    cols = detect_columns(["Transaction Date", " DATE ", "Amount", "Details", "Narrative"])
    assert cols == ColumnMap(date=1, amount=2, description=4)


def test_detect_columns_duplicate_header_uses_first():
    cols = detect_columns(["Date", "Date", "Amount", "Description"])
    assert cols == ColumnMap(date=0, amount=2, description=3)


def test_detect_columns_falls_back_when_incomplete():
    assert detect_columns(["Date", "Amount", "Memo"]) == FALLBACK_COLUMNS
    assert detect_columns([]) == FALLBACK_COLUMNS
    assert detect_columns(None) == FALLBACK_COLUMNS
    assert FALLBACK_COLUMNS == ColumnMap(date=2, amount=5, description=9)
