"""Budget category model with its spend ledger."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List

from models.transaction import TransactionEntry


class CategoryOutcome(Enum):
    """Result of adding a category that may already exist."""

    CREATED = "created"
    UPDATED = "updated"


@dataclass
class BudgetCategory:
    """A named budget bucket owned by one user.

    Attributes:
        user_id: ID of the owning user.
        name: Category name (unique per user).
        original_value: Planned budget for the category.
        spent_amount_so_far: Running total of every recorded spend.
        transaction_history: ISO date (YYYY-MM-DD) mapped to the entries
            recorded that day, in the order they were recorded.
    """

    user_id: int
    name: str
    original_value: Decimal
    spent_amount_so_far: Decimal = Decimal("0")
    transaction_history: Dict[str, List[TransactionEntry]] = field(
        default_factory=dict
    )

    @property
    def remaining(self) -> Decimal:
        """Planned value minus spend so far (negative when overspent)."""
        return self.original_value - self.spent_amount_so_far

    def transaction_count(self) -> int:
        return sum(len(entries) for entries in self.transaction_history.values())

    def to_dict(self) -> dict:
        """Convert category to the BudgetCategoryItem API shape."""
        return {
            "category": self.name,
            "originalValue": float(self.original_value),
            "spentAmountSoFar": float(self.spent_amount_so_far),
            "transactionHistory": {
                day: [entry.to_dict() for entry in entries]
                for day, entries in self.transaction_history.items()
            },
        }
