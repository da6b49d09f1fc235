from datetime import date, timedelta

from expense_insights.suggestions import GENERIC_TIPS, ONBOARDING_TIPS, generate_suggestions

TODAY = date(2026, 10, 18)

FOOD_TIP = "Your food expenses are high. Try meal prepping or cooking at home more often to save money."
ENTERTAINMENT_TIP = "Look for free or low-cost entertainment alternatives like parks, libraries, or community events."
SHOPPING_TIP = "Before making a purchase, wait 24 hours. This helps avoid impulse buying and saves money."
FREQUENT_TIP = "You're making frequent transactions. Consider consolidating purchases to reduce spending opportunities."


def expense(category, amount, day=TODAY):
    return {"category": category, "amount": amount, "date": day.isoformat(), "description": "test"}


def test_empty_snapshot_returns_onboarding_tips():
    assert generate_suggestions([], TODAY) == [
        "Start tracking your expenses to get personalized savings tips",
        "Set a monthly budget to better manage your finances",
        "Consider using the 50/30/20 rule: 50% needs, 30% wants, 20% savings",
    ]
    assert generate_suggestions([], TODAY) == list(ONBOARDING_TIPS)


def test_food_and_shopping_snapshot():
    first_of_month = TODAY.replace(day=1)
    expenses = [expense("Food", 120, first_of_month), expense("Shopping", 30, first_of_month)]
    suggestions = generate_suggestions(expenses, TODAY)
    assert suggestions == [
        "Food accounts for 80% of your spending. Consider setting a specific budget for this category.",
        FOOD_TIP,
        SHOPPING_TIP,
    ]


def test_frequent_transactions_in_last_week():
    expenses = [expense("Other", 10, TODAY - timedelta(days=i % 7)) for i in range(11)]
    suggestions = generate_suggestions(expenses, TODAY)
    assert suggestions[0].startswith("Other accounts for 100% of your spending.")
    assert suggestions[1] == FREQUENT_TIP
    # two rules fired, so all generic tips are added and the list is capped at five
    assert suggestions[2:] == list(GENERIC_TIPS)


def test_frequency_window_includes_the_boundary_day():
    week_ago = TODAY - timedelta(days=7)
    assert FREQUENT_TIP in generate_suggestions([expense("Other", 10, week_ago)] * 11, TODAY)

    eight_days_ago = TODAY - timedelta(days=8)
    assert FREQUENT_TIP not in generate_suggestions([expense("Other", 10, eight_days_ago)] * 11, TODAY)


def test_ten_recent_expenses_are_not_frequent():
    assert FREQUENT_TIP not in generate_suggestions([expense("Other", 10)] * 10, TODAY)


def test_backfill_can_exceed_three():
    suggestions = generate_suggestions([expense("Travel", 50, date(2026, 1, 3))], TODAY)
    assert len(suggestions) == 4
    assert suggestions[1:] == list(GENERIC_TIPS)


def test_list_is_capped_at_five_in_rule_order():
    expenses = (
        [expense("Food", 200)] * 6
        + [expense("Entertainment", 200)] * 3
        + [expense("Shopping", 200)] * 2
    )
    suggestions = generate_suggestions(expenses, TODAY)
    assert suggestions == [
        "Food accounts for 55% of your spending. Consider setting a specific budget for this category.",
        FOOD_TIP,
        ENTERTAINMENT_TIP,
        SHOPPING_TIP,
        FREQUENT_TIP,
    ]


def test_high_average_transaction():
    suggestions = generate_suggestions([expense("Travel", 450, date(2026, 3, 1))], TODAY)
    assert suggestions[1] == (
        "Your average transaction is high. Look for opportunities to buy in bulk or find discounts on big purchases."
    )
    assert len(suggestions) == 5


def test_food_tip_needs_more_than_thirty_percent():
    expenses = [expense("Food", 30), expense("Travel", 70)]
    assert FOOD_TIP not in generate_suggestions(expenses, TODAY)


def test_top_category_ties_go_to_first_seen():
    categories = ["Food", "Travel", "Shopping", "Entertainment", "Utilities", "Healthcare", "Education", "Other"]
    expenses = [expense(category, 10) for category in categories]
    suggestions = generate_suggestions(expenses, TODAY)
    # 12.5% rounds half up
    assert suggestions == [
        "Food accounts for 13% of your spending. Consider setting a specific budget for this category.",
        ENTERTAINMENT_TIP,
        SHOPPING_TIP,
    ]


def test_zero_spending_does_not_divide_by_zero():
    suggestions = generate_suggestions([expense("Food", 0)], TODAY)
    assert suggestions[0] == "Food accounts for 0% of your spending. Consider setting a specific budget for this category."
    assert FOOD_TIP not in suggestions
    assert len(suggestions) == 4


def test_length_always_between_three_and_five():
    snapshots = [
        [expense("Food", 5)],
        [expense("Shopping", 500)] * 20,
        [expense("Entertainment", 1), expense("Food", 1), expense("Shopping", 1)],
    ]
    for snapshot in snapshots:
        assert 3 <= len(generate_suggestions(snapshot, TODAY)) <= 5


def test_suggestions_are_repeatable():
    expenses = [expense("Food", 120), expense("Shopping", 30)]
    assert generate_suggestions(expenses, TODAY) == generate_suggestions(expenses, TODAY)
