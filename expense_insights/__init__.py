"""
expense_insights
~~~~~~~~~~~~~~~~

Analytics library for the Expense Insights service. The aggregation helpers
turn a snapshot of expenses into dashboard metrics and the suggestion engine
turns the same snapshot into savings tips. Nothing here performs I/O, so the
same code can back FastAPI routes, scripts, or serverless functions.
"""

from .aggregation import (
    MONTHLY_WINDOW,
    WEEKLY_WINDOW,
    DailyTotal,
    ExpenseAnalyzer,
    average_daily_spend,
    average_transaction,
    category_breakdown,
    category_totals,
    count_since,
    daily_series,
    month_total,
    percentage_change,
    previous_month_total,
    recent_expenses,
    sorted_category_totals,
    top_categories,
    total_spending,
)
from .suggestions import SuggestionRule, SpendingProfile, generate_suggestions

__all__ = [
    "MONTHLY_WINDOW",
    "WEEKLY_WINDOW",
    "DailyTotal",
    "ExpenseAnalyzer",
    "SpendingProfile",
    "SuggestionRule",
    "average_daily_spend",
    "average_transaction",
    "category_breakdown",
    "category_totals",
    "count_since",
    "daily_series",
    "generate_suggestions",
    "month_total",
    "percentage_change",
    "previous_month_total",
    "recent_expenses",
    "sorted_category_totals",
    "top_categories",
    "total_spending",
]
