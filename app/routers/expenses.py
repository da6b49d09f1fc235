import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from app.db import dynamo
from app.models.expense import Expense, ExpenseCreate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/", response_model=Expense, status_code=status.HTTP_201_CREATED)
def create_expense(expense: ExpenseCreate):
    return dynamo.insert_expense(expense)


@router.get("/", response_model=List[Expense])
def list_expenses(start: Optional[date] = None, end: Optional[date] = None):
    """
    List expenses newest first. Pass both start and end (YYYY-MM-DD) to
    restrict the list to an inclusive date range.
    """
    if start is None and end is None:
        return dynamo.list_expenses()

    if start is None or end is None:
        raise HTTPException(status_code=400, detail="start and end must be given together")
    if start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")

    logger.info(f"Listing expenses from {start} to {end}")
    return dynamo.list_expenses_by_date_range(start, end)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(expense_id: str):
    deleted = dynamo.delete_expense(expense_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Expense not found")
    return None
