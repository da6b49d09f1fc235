from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence

from .aggregation import category_totals, count_since

FOOD_SHARE_THRESHOLD = 30
FREQUENT_TRANSACTIONS_THRESHOLD = 10
FREQUENCY_WINDOW_DAYS = 7
HIGH_AVERAGE_TRANSACTION = 100
MIN_SUGGESTIONS = 3
MAX_SUGGESTIONS = 5

ONBOARDING_TIPS = (
    "Start tracking your expenses to get personalized savings tips",
    "Set a monthly budget to better manage your finances",
    "Consider using the 50/30/20 rule: 50% needs, 30% wants, 20% savings",
)

GENERIC_TIPS = (
    "Track your spending for at least a month to identify patterns and areas to save.",
    "Consider the 24-hour rule for non-essential purchases over $50.",
    "Review your subscriptions and cancel ones you don't actively use.",
)


@dataclass
class SpendingProfile:
    """Everything the rules look at, computed once per snapshot."""

    totals: Dict[str, float]
    total_spending: float
    top_category: Optional[str]
    top_total: float
    recent_count: int
    average_transaction: float

    @classmethod
    def from_expenses(cls, expenses: Sequence[Any], today: date) -> "SpendingProfile":
        totals = category_totals(expenses)
        total = sum(totals.values())
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        top_category, top_total = ranked[0] if ranked else (None, 0.0)
        week_ago = today - timedelta(days=FREQUENCY_WINDOW_DAYS)
        return cls(
            totals=totals,
            total_spending=total,
            top_category=top_category,
            top_total=top_total,
            recent_count=count_since(expenses, week_ago),
            average_transaction=total / len(expenses) if expenses else 0.0,
        )

    def share(self, category: str) -> float:
        if self.total_spending == 0:
            return 0.0
        return self.totals.get(category, 0.0) / self.total_spending * 100

    def has_spending(self, category: str) -> bool:
        return self.totals.get(category, 0.0) > 0


@dataclass(frozen=True)
class SuggestionRule:
    name: str
    predicate: Callable[[SpendingProfile], bool]
    message: Callable[[SpendingProfile], str]


def _whole_percent(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _top_category_message(profile: SpendingProfile) -> str:
    pct = _whole_percent(profile.share(profile.top_category))
    return (
        f"{profile.top_category} accounts for {pct}% of your spending. "
        "Consider setting a specific budget for this category."
    )


RULES = (
    SuggestionRule(
        "top_category",
        lambda p: p.top_category is not None,
        _top_category_message,
    ),
    SuggestionRule(
        "food_share",
        lambda p: p.has_spending("Food") and p.share("Food") > FOOD_SHARE_THRESHOLD,
        lambda p: "Your food expenses are high. Try meal prepping or cooking at home more often to save money.",
    ),
    SuggestionRule(
        "entertainment",
        lambda p: p.has_spending("Entertainment"),
        lambda p: "Look for free or low-cost entertainment alternatives like parks, libraries, or community events.",
    ),
    SuggestionRule(
        "shopping",
        lambda p: p.has_spending("Shopping"),
        lambda p: "Before making a purchase, wait 24 hours. This helps avoid impulse buying and saves money.",
    ),
    SuggestionRule(
        "frequent_transactions",
        lambda p: p.recent_count > FREQUENT_TRANSACTIONS_THRESHOLD,
        lambda p: "You're making frequent transactions. Consider consolidating purchases to reduce spending opportunities.",
    ),
    SuggestionRule(
        "high_average_transaction",
        lambda p: p.average_transaction > HIGH_AVERAGE_TRANSACTION,
        lambda p: "Your average transaction is high. Look for opportunities to buy in bulk or find discounts on big purchases.",
    ),
)


def _backfill(suggestions: List[str]) -> List[str]:
    # all three generic tips are appended, even if that overshoots the cap
    if len(suggestions) < MIN_SUGGESTIONS:
        return suggestions + list(GENERIC_TIPS)
    return suggestions


def generate_suggestions(
    expenses: Sequence[Any],
    today: Optional[date] = None,
    rules: Sequence[SuggestionRule] = RULES,
) -> List[str]:
    """
    Produce between 3 and 5 savings tips for a snapshot of expenses.

    Rules run in order and each may append one message; none of them stops
    the others. Short lists are then backfilled with generic tips and the
    result is cut to the first five entries without reordering.
    """
    if not expenses:
        return list(ONBOARDING_TIPS)

    profile = SpendingProfile.from_expenses(expenses, today or date.today())
    suggestions = [rule.message(profile) for rule in rules if rule.predicate(profile)]
    return _backfill(suggestions)[:MAX_SUGGESTIONS]
