from datetime import date as Date, datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    FOOD = "Food"
    TRAVEL = "Travel"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    OTHER = "Other"


EXPENSE_CATEGORIES = [category.value for category in Category]


class ExpenseCreate(BaseModel):
    amount: float = Field(ge=0)
    category: Category
    description: str
    date: Date = Field(default_factory=Date.today)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        return value


class Expense(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    amount: float
    # Stored as plain text: aggregation accepts any label it is given
    category: str
    description: str
    date: Date
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_create(cls, expense: ExpenseCreate) -> "Expense":
        return cls(
            amount=expense.amount,
            category=expense.category.value,
            description=expense.description,
            date=expense.date,
        )


class CategoryTotal(BaseModel):
    category: str
    total: float
    percentage: Optional[float] = None


class DailyTotal(BaseModel):
    date: Date
    label: str
    total: float


class DashboardSummary(BaseModel):
    total_spending: float
    month_total: float
    transaction_count: int
    category_breakdown: List[CategoryTotal]
    weekly_series: List[DailyTotal]
    recent_expenses: List[Expense]


class AnalyticsSummary(BaseModel):
    month_total: float
    previous_month_total: float
    percentage_change: float
    average_daily_spend: float
    top_categories: List[CategoryTotal]
    highest_category: Optional[str] = None
    monthly_series: List[DailyTotal]
    transaction_count: int
    average_transaction: float


class SuggestionsResponse(BaseModel):
    suggestions: List[str]
