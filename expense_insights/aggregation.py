from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Sequence, Tuple

WEEKLY_WINDOW = 7
MONTHLY_WINDOW = 30


@dataclass
class DailyTotal:
    """One point of a fixed-length daily spending series."""

    date: date
    label: str
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _field(expense: Any, name: str, default: Any = None) -> Any:
    if isinstance(expense, dict):
        return expense.get(name, default)
    return getattr(expense, name, default)


def _amount(expense: Any) -> float:
    return float(_field(expense, "amount", 0) or 0)


def _category(expense: Any) -> str:
    category = _field(expense, "category")
    # str-valued enums carry their label in .value
    return getattr(category, "value", category)


def _date(expense: Any) -> date:
    value = _field(expense, "date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def total_spending(expenses: Iterable[Any]) -> float:
    return sum(_amount(exp) for exp in expenses)


def category_totals(expenses: Iterable[Any]) -> Dict[str, float]:
    """
    Sum amounts per category. Categories keep the order in which they first
    appear in the input, which is what ranking ties fall back on.
    """
    totals: Dict[str, float] = {}
    for exp in expenses:
        category = _category(exp)
        if category not in totals:
            totals[category] = 0.0
        totals[category] += _amount(exp)
    return totals


def sorted_category_totals(expenses: Iterable[Any]) -> List[Tuple[str, float]]:
    return sorted(category_totals(expenses).items(), key=lambda item: item[1], reverse=True)


def top_categories(expenses: Iterable[Any], n: int = 3) -> List[Tuple[str, float]]:
    return sorted_category_totals(expenses)[:n]


def category_breakdown(expenses: Sequence[Any]) -> List[Dict[str, Any]]:
    """Sorted category totals with each category's share of total spending."""
    total = total_spending(expenses)
    return [
        {
            "category": category,
            "total": round(amount, 2),
            "percentage": round(amount / total * 100, 2) if total > 0 else 0.0,
        }
        for category, amount in sorted_category_totals(expenses)
    ]


def _day_label(day: date, days: int) -> str:
    if days <= WEEKLY_WINDOW:
        return day.strftime("%a")
    return f"{day.strftime('%b')} {day.day}"


def daily_series(expenses: Sequence[Any], today: date, days: int = WEEKLY_WINDOW) -> List[DailyTotal]:
    """
    Build exactly ``days`` entries ending at ``today`` (inclusive), oldest
    first. Days without expenses are present with a total of 0.
    """
    by_day: Dict[date, float] = {}
    for exp in expenses:
        day = _date(exp)
        by_day[day] = by_day.get(day, 0.0) + _amount(exp)

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(DailyTotal(date=day, label=_day_label(day, days), total=by_day.get(day, 0.0)))
    return series


def _in_month(expense: Any, year: int, month: int) -> bool:
    day = _date(expense)
    return day.year == year and day.month == month


def _previous_month(today: date) -> Tuple[int, int]:
    if today.month == 1:
        return today.year - 1, 12
    return today.year, today.month - 1


def month_total(expenses: Iterable[Any], today: date) -> float:
    return total_spending(exp for exp in expenses if _in_month(exp, today.year, today.month))


def previous_month_total(expenses: Iterable[Any], today: date) -> float:
    year, month = _previous_month(today)
    return total_spending(exp for exp in expenses if _in_month(exp, year, month))


def percentage_change(current: float, previous: float) -> float:
    """
    Month-over-month change in percent. A previous total of 0 yields 0 rather
    than an infinite change, so 0 does not imply there was no prior spending.
    """
    if previous > 0:
        return (current - previous) / previous * 100
    return 0.0


def average_daily_spend(expenses: Sequence[Any], today: date) -> float:
    this_month = [exp for exp in expenses if _in_month(exp, today.year, today.month)]
    if not this_month:
        return 0.0
    return total_spending(this_month) / today.day


def average_transaction(expenses: Sequence[Any]) -> float:
    if not expenses:
        return 0.0
    return total_spending(expenses) / len(expenses)


def count_since(expenses: Iterable[Any], since: date) -> int:
    return sum(1 for exp in expenses if _date(exp) >= since)


def _created_key(expense: Any) -> str:
    created_at = _field(expense, "created_at")
    if isinstance(created_at, datetime):
        return created_at.isoformat()
    return str(created_at or "")


def recent_expenses(expenses: Sequence[Any], limit: int = 5) -> List[Any]:
    ordered = sorted(expenses, key=lambda exp: (_date(exp), _created_key(exp)), reverse=True)
    return ordered[:limit]


class ExpenseAnalyzer:
    """
    Bundles the aggregation helpers into the two views the API serves:
    the overview dashboard and the detailed analytics page.
    """

    def __init__(self, recent_limit: int = 5, top_n: int = 3) -> None:
        self._recent_limit = recent_limit
        self._top_n = top_n

    def dashboard(self, expenses: Sequence[Any], today: date) -> Dict[str, Any]:
        return {
            "total_spending": round(total_spending(expenses), 2),
            "month_total": round(month_total(expenses, today), 2),
            "transaction_count": len(expenses),
            "category_breakdown": category_breakdown(expenses),
            "weekly_series": [entry.to_dict() for entry in daily_series(expenses, today, WEEKLY_WINDOW)],
            "recent_expenses": recent_expenses(expenses, self._recent_limit),
        }

    def analytics(self, expenses: Sequence[Any], today: date) -> Dict[str, Any]:
        current = month_total(expenses, today)
        previous = previous_month_total(expenses, today)
        top = top_categories(expenses, self._top_n)
        return {
            "month_total": round(current, 2),
            "previous_month_total": round(previous, 2),
            "percentage_change": round(percentage_change(current, previous), 1),
            "average_daily_spend": round(average_daily_spend(expenses, today), 2),
            "top_categories": [
                {"category": category, "total": round(amount, 2)} for category, amount in top
            ],
            "highest_category": top[0][0] if top else None,
            "monthly_series": [entry.to_dict() for entry in daily_series(expenses, today, MONTHLY_WINDOW)],
            "transaction_count": len(expenses),
            "average_transaction": round(average_transaction(expenses), 2),
        }
