"""Static budget and threshold tables used by the insight rules."""

from typing import Dict, FrozenSet, Tuple

# Monthly budget ceilings, checked in declaration order
DEFAULT_BUDGETS: Dict[str, float] = {
    "Food & Dining": 400,
    "Transportation": 200,
    "Entertainment": 150,
    "Shopping": 200,
    "Healthcare": 100,
    "Travel": 300,
    "Personal Care": 50,
    "Other": 100,
}


class Thresholds:
    FOOD_SPENDING_RATIO = 0.3
    ENTERTAINMENT_SPENDING_RATIO = 0.15
    HIGH_CATEGORY_RATIO = 0.2
    SAVINGS_RATE_HIGH = 20
    SAVINGS_RATE_LOW = 10
    RECURRING_EXPENSES_RATIO = 0.6
    BUDGET_WARNING_RATIO = 0.8
    # Share of an over-threshold category assumed recoverable
    SAVINGS_ESTIMATE_RATIO = 0.2


FOOD_CATEGORY = "Food & Dining"
ENTERTAINMENT_CATEGORY = "Entertainment"

# Categories already covered by dedicated insights
EXCLUDED_HIGH_SPENDING_CATEGORIES: FrozenSet[str] = frozenset(
    {"Food & Dining", "Housing", "Transportation"}
)
RECURRING_CATEGORIES: Tuple[str, ...] = ("Housing", "Utilities", "Transportation")

CURRENCY_SYMBOL = "$"
DISPLAY_CURRENCY_SYMBOL = "₱"
# Amounts are stored in USD and shown in PHP on reports
USD_TO_PHP = 56.5
