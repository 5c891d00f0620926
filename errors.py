"""Error types raised by the budget services."""


class BudgetError(Exception):
    """Base class for all budget errors."""


class ValidationError(BudgetError, ValueError):
    """Malformed or out-of-range input. Nothing was changed."""


class NotFoundError(BudgetError):
    """The referenced record does not exist. Nothing was changed."""


class CategoryNotFoundError(NotFoundError):
    """No category with this name exists for the user."""

    def __init__(self, user_id: int, category_name: str):
        self.user_id = user_id
        self.category_name = category_name
        super().__init__(
            f"Budget category '{category_name}' not found for user {user_id}"
        )


class UserNotFoundError(NotFoundError):
    """No user with this ID exists."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class StorageError(BudgetError):
    """Unexpected failure in the persistence layer."""
