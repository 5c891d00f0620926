from dataclasses import dataclass
from decimal import Decimal


@dataclass
class TransactionEntry:
    amount: Decimal  # always positive
    description: str

    def to_dict(self) -> dict:
        """Convert entry to the API response shape."""
        return {
            "amount": float(self.amount),
            "description": self.description,
        }
