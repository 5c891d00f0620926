"""Ledger service: records spends against budget categories."""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from db.history_codec import encode_history
from db.manager import write_transaction
from errors import CategoryNotFoundError, ValidationError
from logger import get_logger
from models.transaction import TransactionEntry
from services.validation import (
    clean_category_name,
    clean_description,
    fits_float,
    to_spend_amount,
)

logger = get_logger()


class LedgerService:
    """Service for recording spend events in a category's history."""

    def __init__(self, db_manager, categories, clock: Callable[[], date] = date.today):
        """Initialize the ledger service.

        Args:
            db_manager: Database manager instance for database operations.
            categories: CategoryService used to look categories up.
            clock: Returns the current server-local date; used when no event
                date is given.
        """
        self.db_manager = db_manager
        self.categories = categories
        self.clock = clock

    def record_spend(
        self,
        user_id: int,
        category_name: str,
        amount_spent,
        description: str,
        event_date: Optional[date] = None,
    ) -> Decimal:
        """Record a spend and return the category's new spent total.

        The lookup, total update and history append happen in one write
        transaction, so concurrent spends on the same category never lose
        an update. The entry goes at the end of the event date's bucket.

        Args:
            user_id: Owner of the category.
            category_name: Category to spend against.
            amount_spent: Amount spent (> 0).
            description: What the money was spent on (non-empty).
            event_date: Date bucket for the entry. Defaults to today.

        Returns:
            The new spent_amount_so_far.

        Raises:
            ValidationError: If any argument is out of range.
            CategoryNotFoundError: If the category does not exist. Nothing is written.
        """
        name = clean_category_name(category_name)
        amount = to_spend_amount(amount_spent)
        description = clean_description(description)
        bucket = (event_date or self.clock()).isoformat()

        with self.db_manager.connect() as conn, write_transaction(conn):
            category = self.categories.find_for_update(conn, user_id, name)
            if category is None:
                logger.warning(
                    f"Spend rejected: category '{name}' not found for user {user_id}"
                )
                raise CategoryNotFoundError(user_id, name)

            new_total = category.spent_amount_so_far + amount
            if not fits_float(new_total):
                raise ValidationError(
                    f"amountSpent would push the total for '{name}' out of range"
                )

            history = category.transaction_history
            history.setdefault(bucket, []).append(
                TransactionEntry(amount=amount, description=description)
            )

            conn.execute(
                """
                UPDATE budgets
                SET spent_amount_so_far = ?, transaction_history = ?
                WHERE user_id = ? AND category = ?
                """,
                (str(new_total), encode_history(history), user_id, name),
            )

        logger.info(
            f"Recorded spend of {amount} on '{name}' for user {user_id} ({bucket}); "
            f"new total {new_total}"
        )
        return new_total
