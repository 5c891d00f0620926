"""Budget analysis tools."""

from datetime import date
from decimal import Decimal
from typing import Dict, List

from dateutil.relativedelta import relativedelta

from models.category import BudgetCategory


def get_budget_overview(services, user_id: int) -> Dict[str, object]:
    """Summarize planned vs. spent for every category a user owns.

    Args:
        services: Services container with the category service.
        user_id: Owner of the categories.

    Returns:
        Dictionary with:
        - "categories": list of per-category rows (category, original_value,
          spent_amount_so_far, remaining, over_budget, transaction_count)
        - "totals": original_value, spent_amount_so_far and remaining summed
          over all categories

    Example:
        {
            "categories": [
                {
                    "category": "Groceries",
                    "original_value": Decimal("300"),
                    "spent_amount_so_far": Decimal("57.75"),
                    "remaining": Decimal("242.25"),
                    "over_budget": False,
                    "transaction_count": 2,
                },
            ],
            "totals": {
                "original_value": Decimal("300"),
                "spent_amount_so_far": Decimal("57.75"),
                "remaining": Decimal("242.25"),
            },
        }
    """
    rows: List[Dict[str, object]] = []
    total_original = Decimal("0")
    total_spent = Decimal("0")

    for category in services.categories.find_all(user_id):
        rows.append(
            {
                "category": category.name,
                "original_value": category.original_value,
                "spent_amount_so_far": category.spent_amount_so_far,
                "remaining": category.remaining,
                "over_budget": category.remaining < 0,
                "transaction_count": category.transaction_count(),
            }
        )
        total_original += category.original_value
        total_spent += category.spent_amount_so_far

    return {
        "categories": rows,
        "totals": {
            "original_value": total_original,
            "spent_amount_so_far": total_spent,
            "remaining": total_original - total_spent,
        },
    }


def get_monthly_spending(
    category: BudgetCategory, start_month: date, end_month: date
) -> Dict[str, Decimal]:
    """Total a category's spends per month over a period.

    Args:
        category: Category whose history is summed.
        start_month: Start of period (date object, day component ignored).
        end_month: End of period (date object, day component ignored).

    Returns:
        Month keys (format: "YYYY/MM", inclusive range, in order) mapped to
        the amount spent that month. Months without spends map to Decimal("0").
    """
    result: Dict[str, Decimal] = {}

    current = start_month.replace(day=1)
    last = end_month.replace(day=1)
    while current <= last:
        result[f"{current.year:04d}/{current.month:02d}"] = Decimal("0")
        current += relativedelta(months=1)

    for day, entries in category.transaction_history.items():
        month_key = f"{day[0:4]}/{day[5:7]}"
        if month_key in result:
            result[month_key] += sum((e.amount for e in entries), Decimal("0"))

    return result
