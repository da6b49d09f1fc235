"""
Suggestions Router
Rule-based savings tips for the current expense snapshot
"""
import logging
from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.exceptions import DataAccessError
from app.db import dynamo
from app.models.expense import SuggestionsResponse
from app.routers.analytics import reference_date
from expense_insights import generate_suggestions

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=SuggestionsResponse)
def get_suggestions(today: date = Depends(reference_date)):
    """
    Returns 3 to 5 savings tips. A failed read yields a 500 response that
    still carries an (empty) suggestions list.
    """
    try:
        expenses = dynamo.list_expenses()
    except DataAccessError as e:
        logger.error(f"Could not load expenses for suggestions: {str(e)}")
        return JSONResponse(status_code=500, content={"error": str(e), "suggestions": []})

    return SuggestionsResponse(suggestions=generate_suggestions(expenses, today))
