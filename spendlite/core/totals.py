# spendlite/core/totals.py
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from spendlite.core.models import UNCATEGORISED, Transaction


@dataclass
class CategoryTotals:
    rows: List[Tuple[str, float]]
    grand_total: float


@dataclass
class FlowSummary:
    debit: float
    credit: float

    @property
    def net(self):
        return self.debit - self.credit


def percentage(total, grand_total):
    if not grand_total:
        return 0.0
    return total / grand_total * 100


def _amount(tx):
    try:
        return float(tx.amount or 0)
    except (TypeError, ValueError):
        return 0.0


def compute_category_totals(transactions: Iterable[Transaction]) -> CategoryTotals:
    """
    Sum amounts per category, largest total first.

    Categories with equal totals keep the order in which they first appear.
    """
    by_cat = {}
    for tx in transactions:
        cat = (tx.category or UNCATEGORISED).upper()
        by_cat[cat] = by_cat.get(cat, 0.0) + _amount(tx)
    rows = sorted(by_cat.items(), key=lambda item: item[1], reverse=True)
    grand = sum(total for _, total in rows)
    return CategoryTotals(rows=rows, grand_total=grand)


def summarize_flows(transactions: Iterable[Transaction]) -> FlowSummary:
    debit = 0.0
    credit = 0.0
    for tx in transactions:
        value = _amount(tx)
        if value > 0:
            debit += value
        else:
            credit += abs(value)
    return FlowSummary(debit=debit, credit=credit)
