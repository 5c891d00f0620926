"""Input checks shared by the budget services."""

import math
from decimal import Decimal, InvalidOperation

from errors import ValidationError


def clean_category_name(category_name) -> str:
    """Return the category name stripped of surrounding whitespace.

    Names are keyed after stripping, so "Rent " and "Rent" are the same
    category. This differs from keying on the exact string as sent.

    Raises:
        ValidationError: If the name is missing or blank.
    """
    if not isinstance(category_name, str) or not category_name.strip():
        raise ValidationError("Category name cannot be empty")
    return category_name.strip()


def clean_description(description) -> str:
    """Check the description is not blank; it is stored exactly as given."""
    if not isinstance(description, str) or not description.strip():
        raise ValidationError("Description cannot be empty")
    return description


def fits_float(amount: Decimal) -> bool:
    """True if the amount converts to a finite float for JSON responses."""
    return math.isfinite(float(amount))


def to_amount(value, field_name: str) -> Decimal:
    """Convert a user-supplied number to a finite Decimal.

    Floats go through str() so 45.5 becomes Decimal("45.5") rather than its
    binary expansion.

    Args:
        value: int, float, str or Decimal.
        field_name: Name used in the error message.

    Returns:
        The value as a Decimal.

    Raises:
        ValidationError: If the value is not a finite number.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")

    if not amount.is_finite() or not fits_float(amount):
        raise ValidationError(f"{field_name} must be a finite number")
    return amount


def to_original_value(value) -> Decimal:
    amount = to_amount(value, "originalValue")
    if amount < 0:
        raise ValidationError("originalValue cannot be negative")
    return amount


def to_spend_amount(value) -> Decimal:
    amount = to_amount(value, "amountSpent")
    if amount <= 0:
        raise ValidationError("amountSpent must be greater than zero")
    return amount
