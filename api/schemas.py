"""Request and response bodies for the budget HTTP API."""

from typing import Dict, List

from pydantic import BaseModel


class AddBudgetCategoryRequest(BaseModel):
    categoryName: str
    originalValue: float


class RecordSpendRequest(BaseModel):
    categoryName: str
    amountSpent: float
    description: str


class TransactionEntryItem(BaseModel):
    amount: float
    description: str


class BudgetCategoryItem(BaseModel):
    category: str
    originalValue: float
    spentAmountSoFar: float
    transactionHistory: Dict[str, List[TransactionEntryItem]]
