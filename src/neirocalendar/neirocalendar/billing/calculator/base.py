from __future__ import annotations

from abc import ABC, abstractmethod


class BillingCalculator(ABC):
    """Calculator interface (Strategy Pattern for billing)."""

    @abstractmethod
    def total_cost(self, attended_count: int) -> int:
        raise NotImplementedError
