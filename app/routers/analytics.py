"""
Analytics Router
Dashboard and analytics views computed from the current expense snapshot
"""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.db import dynamo
from app.models.expense import AnalyticsSummary, DashboardSummary
from expense_insights import ExpenseAnalyzer

router = APIRouter()
logger = logging.getLogger(__name__)
expense_analyzer = ExpenseAnalyzer()


def reference_date(
    today: Optional[date] = Query(default=None, description="Reference date (YYYY-MM-DD), defaults to the server's date"),
) -> date:
    return today or date.today()


@router.get("/dashboard", response_model=DashboardSummary)
def get_dashboard(today: date = Depends(reference_date)):
    expenses = dynamo.list_expenses()
    logger.info(f"Building dashboard from {len(expenses)} expenses as of {today}")
    return expense_analyzer.dashboard(expenses, today)


@router.get("/summary", response_model=AnalyticsSummary)
def get_summary(today: date = Depends(reference_date)):
    expenses = dynamo.list_expenses()
    logger.info(f"Building analytics summary from {len(expenses)} expenses as of {today}")
    return expense_analyzer.analytics(expenses, today)
