"""Category service for database operations."""

import sqlite3
from decimal import Decimal
from typing import List, Optional

from db.history_codec import EMPTY_HISTORY, decode_history
from db.manager import write_transaction
from errors import UserNotFoundError
from logger import get_logger
from models.category import BudgetCategory, CategoryOutcome
from services.validation import clean_category_name, to_original_value

logger = get_logger()

_CATEGORY_SELECT_FIELDS = (
    "user_id, category, original_value, spent_amount_so_far, transaction_history"
)


def _row_to_category(row) -> BudgetCategory:
    return BudgetCategory(
        user_id=row[0],
        name=row[1],
        original_value=Decimal(row[2]),
        spent_amount_so_far=Decimal(row[3]),
        transaction_history=decode_history(row[4]),
    )


class CategoryService:
    """Service for managing a user's budget categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self, user_id: int) -> List[BudgetCategory]:
        """Get all categories owned by a user.

        Args:
            user_id: Owner of the categories.

        Returns:
            List of BudgetCategory objects with history decoded, ordered by name.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_CATEGORY_SELECT_FIELDS} FROM budgets "
                "WHERE user_id = ? ORDER BY category",
                (user_id,),
            )
            return [_row_to_category(row) for row in cursor.fetchall()]

    def find(self, user_id: int, category_name: str) -> Optional[BudgetCategory]:
        """Get a single category by name.

        Args:
            user_id: Owner of the category.
            category_name: The category name to find (case-sensitive).

        Returns:
            BudgetCategory object if found, None otherwise.
        """
        name = clean_category_name(category_name)
        with self.db_manager.connect() as conn:
            return self.find_for_update(conn, user_id, name)

    def find_for_update(
        self, conn: sqlite3.Connection, user_id: int, category_name: str
    ) -> Optional[BudgetCategory]:
        """Look up a category on an already open connection.

        Used inside a write transaction so the read and the following write
        see the same row state.
        """
        row = conn.execute(
            f"SELECT {_CATEGORY_SELECT_FIELDS} FROM budgets "
            "WHERE user_id = ? AND category = ?",
            (user_id, category_name),
        ).fetchone()

        if row:
            return _row_to_category(row)
        return None

    def add_or_update(
        self, user_id: int, category_name: str, original_value
    ) -> CategoryOutcome:
        """Create a category, or change the planned value of an existing one.

        An existing category keeps its spent total and transaction history;
        only original_value changes.

        Args:
            user_id: Owner of the category.
            category_name: Category name (non-empty).
            original_value: Planned budget (>= 0).

        Returns:
            CategoryOutcome.CREATED or CategoryOutcome.UPDATED.

        Raises:
            ValidationError: If the name is blank or the value is negative or not a number.
            UserNotFoundError: If the user does not exist.
        """
        name = clean_category_name(category_name)
        value = to_original_value(original_value)

        with self.db_manager.connect() as conn, write_transaction(conn):
            user = conn.execute(
                "SELECT 1 FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            if user is None:
                raise UserNotFoundError(user_id)

            cursor = conn.execute(
                "UPDATE budgets SET original_value = ? WHERE user_id = ? AND category = ?",
                (str(value), user_id, name),
            )
            if cursor.rowcount > 0:
                outcome = CategoryOutcome.UPDATED
            else:
                conn.execute(
                    """
                    INSERT INTO budgets
                        (user_id, category, original_value, spent_amount_so_far, transaction_history)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (user_id, name, str(value), "0", EMPTY_HISTORY),
                )
                outcome = CategoryOutcome.CREATED

        logger.info(
            f"Category '{name}' {outcome.value} for user {user_id} (original value {value})"
        )
        return outcome

    def delete(self, user_id: int, category_name: str) -> int:
        """Delete a category together with its transaction history.

        Args:
            user_id: Owner of the category.
            category_name: The category name to delete.

        Returns:
            Number of categories removed (0 if not found, otherwise 1).
        """
        name = clean_category_name(category_name)

        with self.db_manager.connect() as conn, write_transaction(conn):
            cursor = conn.execute(
                "DELETE FROM budgets WHERE user_id = ? AND category = ?",
                (user_id, name),
            )
            deleted = cursor.rowcount

        if deleted:
            logger.info(f"Category '{name}' deleted for user {user_id}")
        else:
            logger.warning(f"Delete skipped: category '{name}' not found for user {user_id}")
        return deleted
