# spendlite/loaders/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from spendlite.core.models import ColumnMap, Transaction


class LoadError(RuntimeError):
    """Raised when a statement cannot be turned into transactions at all."""


@dataclass
class LoadResult:
    transactions: List[Transaction]
    delimiter: str
    columns: ColumnMap
    skipped: int = 0


class BaseLoader(ABC):
    @abstractmethod
    def load_text(self, text: str) -> LoadResult:
        """
        Parse the full contents of a statement file.
        Raise LoadError if nothing usable is found.
        """
        pass

    def load(self, file_path: str) -> LoadResult:
        with open(file_path, newline='', encoding='utf-8-sig') as f:
            return self.load_text(f.read())
