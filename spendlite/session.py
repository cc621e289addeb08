# spendlite/session.py
"""
Session state and the controller that mutates it.

Every public method on Session is one user action (file loaded, rules edited,
filter or page changed, export requested). It runs the whole recomputation
under the session lock before returning, so two actions never interleave.
Everything it calls into in spendlite.core is a pure function.
"""
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from spendlite.core.categorizer import categorize
from spendlite.core.dates import friendly_month, month_label
from spendlite.core.models import Rule, Transaction
from spendlite.core.paging import (
    PAGE_SIZE,
    Page,
    PagerButton,
    available_months,
    build_pager,
    clamp_page,
    filter_by_category,
    filter_by_month,
    paginate,
)
from spendlite.core.rules import parse_rules
from spendlite.core.totals import CategoryTotals, FlowSummary, compute_category_totals, summarize_flows
from spendlite.loaders.bank_csv import BankCSVLoader
from spendlite.loaders.base import BaseLoader
from spendlite.outputs.totals_report import format_totals_report, report_filename

logger = logging.getLogger(__name__)

RULES_FILENAME = "rules.txt"


@dataclass
class SessionState:
    transactions: List[Transaction] = field(default_factory=list)
    rules_text: str = ""
    rules: List[Rule] = field(default_factory=list)
    month: str = ""
    category: Optional[str] = None
    page: int = 1


@dataclass
class SessionView:
    """Everything the presentation layer needs to draw the current state."""
    month_label: str
    category: Optional[str]
    months: List[Tuple[str, str]]
    category_totals: CategoryTotals
    flows: FlowSummary
    filtered_count: int
    page: Page
    pager: List[PagerButton]

    @property
    def banner(self):
        cat = f' + category "{self.category}"' if self.category else ""
        return (
            f"Showing {self.filtered_count} transactions for {self.month_label}{cat}"
            f" · Debit: ${self.flows.debit:.2f}"
            f" · Credit: ${self.flows.credit:.2f}"
            f" · Net: ${self.flows.net:.2f}"
        )


class Session:
    def __init__(self, loader: Optional[BaseLoader] = None, page_size: int = PAGE_SIZE):
        self.loader = loader or BankCSVLoader()
        self.page_size = page_size
        self.state = SessionState()
        self._lock = threading.RLock()

    # -- events ---------------------------------------------------------------

    def load_csv_text(self, text) -> Tuple[bool, str]:
        """
        Replace the loaded transactions with those parsed from text.

        Returns (ok, status message). On failure the previous transactions,
        rules and filters are left as they were.
        """
        return self._load(self.loader.load_text, text)

    def load_csv_file(self, path) -> Tuple[bool, str]:
        return self._load(self.loader.load, path)

    def set_rules_text(self, text):
        with self._lock:
            self.state.rules_text = str(text or "")
            self.state.rules = parse_rules(self.state.rules_text)
            self._recompute()

    def import_rules(self, text):
        self.set_rules_text(text)

    def export_rules(self) -> Tuple[str, str]:
        with self._lock:
            return self.state.rules_text, RULES_FILENAME

    def set_month(self, month: Optional[str]):
        with self._lock:
            self.state.month = month or ""
            self._recompute()

    def clear_month(self):
        self.set_month("")

    def set_category(self, category: Optional[str]):
        with self._lock:
            self.state.category = category.upper() if category else None
            self.state.page = 1
            self._recompute()

    def clear_category(self):
        with self._lock:
            self.state.category = None
            self._recompute()

    def go_to_page(self, page: int):
        with self._lock:
            self.state.page = page
            self._clamp_page()

    def export_totals(self) -> Tuple[str, str]:
        """Return the totals report for the current filters and its filename."""
        with self._lock:
            txns = self._visible()
            label = self.filter_label()
            return format_totals_report(compute_category_totals(txns), label), report_filename(label)

    # -- derived --------------------------------------------------------------

    def filter_label(self) -> str:
        label = friendly_month(self.state.month)
        if self.state.category:
            label = f"{label} - {self.state.category}"
        return label

    def months(self) -> List[Tuple[str, str]]:
        with self._lock:
            return [(key, month_label(key)) for key in available_months(self.state.transactions)]

    def view(self) -> SessionView:
        with self._lock:
            in_month = filter_by_month(self.state.transactions, self.state.month)
            visible = filter_by_category(in_month, self.state.category)
            page = paginate(visible, self.state.page, self.page_size)
            return SessionView(
                month_label=friendly_month(self.state.month),
                category=self.state.category,
                months=self.months(),
                category_totals=compute_category_totals(in_month),
                flows=summarize_flows(visible),
                filtered_count=len(visible),
                page=page,
                pager=build_pager(page.number, page.total_pages),
            )

    # -- internals ------------------------------------------------------------

    def _load(self, read, source) -> Tuple[bool, str]:
        with self._lock:
            try:
                result = read(source)
            except Exception as e:
                logger.warning("Load failed: %s", e)
                return False, f"Load failed: {e}"
            self.state.transactions = result.transactions
            if self.state.month not in available_months(self.state.transactions):
                self.state.month = ""
            self._recompute()
            status = (
                f"Loaded {len(result.transactions)} transactions"
                f' · delimiter="{result.delimiter}"'
                f" · columns = {json.dumps(result.columns.as_dict())}"
            )
            logger.info(status)
            return True, status

    def _visible(self):
        in_month = filter_by_month(self.state.transactions, self.state.month)
        return filter_by_category(in_month, self.state.category)

    def _clamp_page(self):
        self.state.page = clamp_page(self.state.page, len(self._visible()), self.page_size)

    def _recompute(self):
        categorize(self.state.transactions, self.state.rules)
        self._clamp_page()
