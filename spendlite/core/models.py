# spendlite/core/models.py
from dataclasses import dataclass
from typing import Optional

UNCATEGORISED = "UNCATEGORISED"


@dataclass
class Transaction:
    date: str
    amount: float
    description: str
    category: Optional[str] = None
    amount_parsed: bool = True


@dataclass(frozen=True)
class Rule:
    keyword: str
    category: str


@dataclass(frozen=True)
class ColumnMap:
    date: int
    amount: int
    description: int

    @property
    def min_row_length(self):
        return max(self.date, self.amount, self.description) + 1

    def as_dict(self):
        return {"date": self.date, "amount": self.amount, "description": self.description}
