from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from api.schemas import AddBudgetCategoryRequest, BudgetCategoryItem, RecordSpendRequest
from errors import CategoryNotFoundError
from models.category import CategoryOutcome
from services.base import Services

router = APIRouter(prefix="/budget", tags=["budget"])


def get_services(request: Request) -> Services:
    return request.app.state.services


def _user_id(services: Services) -> int:
    return services.config.default_user_id


@router.post("/addCategory", response_class=PlainTextResponse)
def add_category(
    body: AddBudgetCategoryRequest, services: Services = Depends(get_services)
):
    """Create a budget category or update its planned value"""
    outcome = services.categories.add_or_update(
        _user_id(services), body.categoryName, body.originalValue
    )
    name = body.categoryName.strip()
    if outcome is CategoryOutcome.CREATED:
        return PlainTextResponse(
            f"Budget category '{name}' added successfully.",
            status_code=status.HTTP_201_CREATED,
        )
    return PlainTextResponse(f"Budget category '{name}' updated successfully.")


@router.post("/recordSpend", response_class=PlainTextResponse)
def record_spend(body: RecordSpendRequest, services: Services = Depends(get_services)):
    """Record a spend against an existing category"""
    name = body.categoryName.strip()
    try:
        new_total = services.ledger.record_spend(
            _user_id(services), body.categoryName, body.amountSpent, body.description
        )
    except CategoryNotFoundError:
        return PlainTextResponse(
            f"Budget category '{name}' not found for user.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Spend recorded for '{name}'. New spent total: {new_total}")


@router.delete("/deleteCategory/{category_name}", response_class=PlainTextResponse)
def delete_category(category_name: str, services: Services = Depends(get_services)):
    """Delete a category and its transaction history"""
    deleted = services.categories.delete(_user_id(services), category_name)
    name = category_name.strip()
    if deleted == 0:
        return PlainTextResponse(
            f"Budget category '{name}' not found for user.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(f"Budget category '{name}' deleted successfully.")


@router.get("/getAllCategories", response_model=List[BudgetCategoryItem])
def get_all_categories(services: Services = Depends(get_services)):
    """Get every category with its full history"""
    categories = services.categories.find_all(_user_id(services))
    return [category.to_dict() for category in categories]


@router.get("/getCategoryDetails/{category_name}", response_model=BudgetCategoryItem)
def get_category_details(category_name: str, services: Services = Depends(get_services)):
    """Get one category with its full history"""
    category = services.categories.find(_user_id(services), category_name)
    if category is None:
        return PlainTextResponse(
            f"Category '{category_name.strip()}' not found for user.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return category.to_dict()
