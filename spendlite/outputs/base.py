# spendlite/outputs/base.py
from abc import ABC, abstractmethod


class BaseOutput(ABC):
    @abstractmethod
    def write(self, text, filename):
        """Write an exported payload and return where it went."""
        pass
