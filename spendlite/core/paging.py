# spendlite/core/paging.py
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from spendlite.core.dates import month_key_for
from spendlite.core.models import UNCATEGORISED

PAGE_SIZE = 10
WINDOW_SIZE = 5


def filter_by_month(transactions, month: Optional[str]):
    """Keep transactions whose date falls in the YYYY-MM bucket month."""
    if not month:
        return list(transactions)
    return [tx for tx in transactions if month_key_for(tx.date) == month]


def filter_by_category(transactions, category: Optional[str]):
    if not category:
        return list(transactions)
    wanted = category.upper()
    return [tx for tx in transactions if (tx.category or UNCATEGORISED).upper() == wanted]


def apply_filters(transactions, month=None, category=None):
    return filter_by_category(filter_by_month(transactions, month), category)


def available_months(transactions) -> List[str]:
    months = {month_key_for(tx.date) for tx in transactions}
    months.discard(None)
    return sorted(months)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page, count: int, page_size: int = PAGE_SIZE) -> int:
    pages = total_pages(count, page_size)
    if not page or page < 1:
        return 1
    return min(page, pages)


@dataclass
class Page:
    number: int
    total_pages: int
    items: list


def paginate(items: Sequence, page, page_size: int = PAGE_SIZE) -> Page:
    number = clamp_page(page, len(items), page_size)
    start = (number - 1) * page_size
    return Page(
        number=number,
        total_pages=total_pages(len(items), page_size),
        items=list(items[start:start + page_size]),
    )


def page_window(current: int, pages: int, size: int = WINDOW_SIZE) -> List[int]:
    """Up to `size` consecutive page numbers centred on current."""
    start = max(1, current - size // 2)
    end = min(pages, start + size - 1)
    start = max(1, min(start, end - size + 1))
    return list(range(start, end + 1))


@dataclass
class PagerButton:
    label: str
    page: int
    disabled: bool = False
    active: bool = False


def build_pager(current: int, pages: int, size: int = WINDOW_SIZE) -> List[PagerButton]:
    pages = pages or 1
    current = current or 1
    buttons = [
        PagerButton("First", 1, disabled=current == 1),
        PagerButton("Prev", max(1, current - 1), disabled=current == 1),
    ]
    for p in page_window(current, pages, size):
        buttons.append(PagerButton(str(p), p, active=p == current))
    buttons.append(PagerButton("Next", min(pages, current + 1), disabled=current == pages))
    buttons.append(PagerButton("Last", pages, disabled=current == pages))
    return buttons
