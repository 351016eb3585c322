from __future__ import annotations

from ...core.constants import DEFAULT_PRICE_PER_VISIT
from ...core.exceptions import ValidationError
from .base import BillingCalculator


class FixedPriceCalculator(BillingCalculator):
    """Fixed rule: every attended visit costs the same, regardless of person or date."""

    def __init__(self, price_per_visit: int = DEFAULT_PRICE_PER_VISIT):
        if int(price_per_visit) < 0:
            raise ValidationError("Price per visit must not be negative")
        self.price_per_visit = int(price_per_visit)

    def total_cost(self, attended_count: int) -> int:
        return int(attended_count) * self.price_per_visit
