import logging
from datetime import date
from decimal import Decimal
from typing import Any, List

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import DataAccessError
from app.models.expense import Expense, ExpenseCreate

logger = logging.getLogger(__name__)

# Initialize DynamoDB resource
dynamodb = boto3.resource(
    "dynamodb",
    region_name=settings.DYNAMO_REGION,
    endpoint_url=settings.DYNAMO_ENDPOINT_URL,
)

# Get table reference (partition key: expense_id)
expenses_table = dynamodb.Table(settings.DYNAMO_EXPENSES_TABLE)


def _error_message(error: Exception) -> str:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Message", str(error))
    return str(error)


def _fail(operation: str, error: Exception) -> DataAccessError:
    message = _error_message(error)
    logger.error(f"{operation} failed: {message}")
    return DataAccessError(f"{operation} failed: {message}")


def insert_expense(expense: ExpenseCreate) -> Expense:
    """Store a new expense and return it with its assigned id and created_at."""
    record = Expense.from_create(expense)
    try:
        expenses_table.put_item(
            Item=_to_item(record),
            ConditionExpression=Attr("expense_id").not_exists(),
        )
    except (ClientError, BotoCoreError) as e:
        raise _fail("insert_expense", e) from e
    logger.info(f"Stored expense {record.id} ({record.category}, {record.amount})")
    return record


def list_expenses() -> List[Expense]:
    """All expenses, newest date first."""
    try:
        items = _scan()
    except (ClientError, BotoCoreError) as e:
        raise _fail("list_expenses", e) from e
    return _sorted_newest_first(items)


def list_expenses_by_date_range(start: date, end: date) -> List[Expense]:
    """Expenses whose date lies within [start, end], newest date first."""
    try:
        # ISO dates compare correctly as strings
        items = _scan(FilterExpression=Attr("date").between(start.isoformat(), end.isoformat()))
    except (ClientError, BotoCoreError) as e:
        raise _fail("list_expenses_by_date_range", e) from e
    return _sorted_newest_first(items)


def delete_expense(expense_id: str) -> bool:
    """Delete a specific expense. Returns False when no such expense existed."""
    try:
        response = expenses_table.delete_item(
            Key={"expense_id": expense_id},
            ReturnValues="ALL_OLD",
        )
    except (ClientError, BotoCoreError) as e:
        raise _fail("delete_expense", e) from e
    return "Attributes" in response


def _scan(**kwargs) -> List[dict]:
    """Scan the table following LastEvaluatedKey until every page is read."""
    items: List[dict] = []
    response = expenses_table.scan(**kwargs)
    items.extend(response.get("Items", []))
    while "LastEvaluatedKey" in response:
        response = expenses_table.scan(ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs)
        items.extend(response.get("Items", []))
    return items


def _sorted_newest_first(items: List[dict]) -> List[Expense]:
    expenses = [_from_item(item) for item in items]
    return sorted(expenses, key=lambda exp: (exp.date, exp.created_at), reverse=True)


def _to_item(expense: Expense) -> dict:
    return _convert_for_dynamo({
        "expense_id": expense.id,
        "amount": expense.amount,
        "category": expense.category,
        "description": expense.description,
        "date": expense.date.isoformat(),
        "created_at": expense.created_at.isoformat(),
    })


def _from_item(item: dict) -> Expense:
    data = _from_dynamo(item)
    data["id"] = data.pop("expense_id")
    return Expense(**data)


def _convert_for_dynamo(obj: Any):
    """
    Recursively convert floats to Decimal for DynamoDB compatibility.
    """
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: _convert_for_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_for_dynamo(v) for v in obj]
    return obj


def _from_dynamo(obj: Any):
    """
    Recursively convert Decimal instances back to native Python numeric types.
    """
    if isinstance(obj, list):
        return [_from_dynamo(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _from_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, Decimal):
        if obj % 1 == 0:
            return int(obj)
        return float(obj)
    return obj
