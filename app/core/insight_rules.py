"""
Deterministic insight and budget-alert rules.

Everything here is a pure function of the transaction snapshot plus the
static tables in ``app.core.budget_config``. Output order is insertion order
and callers rely on it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Type

from app.core.budget_config import (
    CURRENCY_SYMBOL,
    DEFAULT_BUDGETS,
    ENTERTAINMENT_CATEGORY,
    EXCLUDED_HIGH_SPENDING_CATEGORIES,
    FOOD_CATEGORY,
    RECURRING_CATEGORIES,
    Thresholds,
)
from app.domain.transaction import Transaction
from app.models.insight_dto import BudgetAlert, Insight, Recommendation


@dataclass(frozen=True)
class SpendingSummary:
    total_income: float
    total_expenses: float
    expense_count: int
    # Keyed in order of first appearance
    category_totals: Dict[str, float] = field(default_factory=dict)

    @property
    def savings_rate(self) -> Optional[float]:
        if self.total_income > 0:
            return (self.total_income - self.total_expenses) / self.total_income * 100
        return None

    def category_total(self, category: str) -> float:
        return self.category_totals.get(category, 0.0)

    def share_of_expenses(self, amount: float) -> float:
        return amount / self.total_expenses * 100

    def sorted_categories(self) -> List[Tuple[str, float]]:
        return sorted(
            self.category_totals.items(), key=lambda item: item[1], reverse=True
        )


def summarize_spending(transactions: Iterable[Transaction]) -> SpendingSummary:
    total_income = 0.0
    total_expenses = 0.0
    expense_count = 0
    category_totals: Dict[str, float] = {}

    for tx in transactions:
        if tx.is_income:
            total_income += tx.magnitude
        elif tx.is_expense:
            total_expenses += tx.magnitude
            expense_count += 1
            category_totals[tx.category] = (
                category_totals.get(tx.category, 0.0) + tx.magnitude
            )

    return SpendingSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        expense_count=expense_count,
        category_totals=category_totals,
    )


def _money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def _format_budget(budget: float) -> str:
    return f"{CURRENCY_SYMBOL}{budget:g}"


def build_rule_insights(
    summary: SpendingSummary, thresholds: Type[Thresholds] = Thresholds
) -> List[Insight]:
    total = summary.total_expenses
    if total == 0:
        return []

    insights: List[Insight] = []

    food = summary.category_total(FOOD_CATEGORY)
    if food > total * thresholds.FOOD_SPENDING_RATIO:
        insights.append(
            Insight(
                type="warning",
                title="High Food Spending",
                message=(
                    f"Your food expenses ({_money(food)}, "
                    f"{summary.share_of_expenses(food):.1f}% of total spending) are "
                    "quite high. Consider meal prepping to save money."
                ),
                icon="AlertTriangle",
                color="text-yellow-600",
            )
        )

    for category, amount in summary.category_totals.items():
        if category in EXCLUDED_HIGH_SPENDING_CATEGORIES:
            continue
        if amount > total * thresholds.HIGH_CATEGORY_RATIO:
            insights.append(
                Insight(
                    type="info",
                    title=f"High {category} Spending",
                    message=(
                        f"{category} represents {_money(amount)} "
                        f"({summary.share_of_expenses(amount):.1f}% of your expenses). "
                        f"Consider reviewing your {category.lower()} habits."
                    ),
                    icon="Lightbulb",
                    color="text-blue-600",
                )
            )

    entertainment = summary.category_total(ENTERTAINMENT_CATEGORY)
    if entertainment > total * thresholds.ENTERTAINMENT_SPENDING_RATIO:
        insights.append(
            Insight(
                type="info",
                title="Entertainment Budget",
                message=(
                    "You're spending more on entertainment than average. "
                    "Look for free or low-cost alternatives."
                ),
                icon="Lightbulb",
                color="text-blue-600",
            )
        )

    savings_rate = summary.savings_rate
    if savings_rate is not None:
        income = _money(summary.total_income)
        if savings_rate > thresholds.SAVINGS_RATE_HIGH:
            insights.append(
                Insight(
                    type="success",
                    title="Great Savings Rate",
                    message=(
                        f"You're saving {savings_rate:.1f}% of your {income} income. "
                        "Keep up the excellent work!"
                    ),
                    icon="TrendingUp",
                    color="text-green-600",
                )
            )
        elif savings_rate < thresholds.SAVINGS_RATE_LOW:
            insights.append(
                Insight(
                    type="warning",
                    title="Low Savings Rate",
                    message=(
                        f"You're only saving {savings_rate:.1f}% of your {income} "
                        "income. Consider cutting back on non-essential expenses."
                    ),
                    icon="AlertTriangle",
                    color="text-red-600",
                )
            )

    recurring = sum(summary.category_total(c) for c in RECURRING_CATEGORIES)
    if recurring > total * thresholds.RECURRING_EXPENSES_RATIO:
        insights.append(
            Insight(
                type="info",
                title="Fixed Expenses Analysis",
                message=(
                    f"{_money(recurring)} ({summary.share_of_expenses(recurring):.1f}% "
                    "of your expenses) are fixed costs. Focus on optimizing variable "
                    "expenses."
                ),
                icon="Brain",
                color="text-purple-600",
            )
        )

    return insights


def build_budget_alerts(
    summary: SpendingSummary,
    budgets: Mapping[str, float] = DEFAULT_BUDGETS,
    thresholds: Type[Thresholds] = Thresholds,
) -> List[BudgetAlert]:
    alerts: List[BudgetAlert] = []
    for category, budget in budgets.items():
        spent = summary.category_total(category)
        if spent > budget:
            over_by = (spent - budget) / budget * 100
            alerts.append(
                BudgetAlert(
                    type="warning",
                    title=f"Budget Exceeded: {category}",
                    message=(
                        f"You've exceeded your {category} budget by {over_by:.1f}%. "
                        f"Spent {_money(spent)} of {_format_budget(budget)}."
                    ),
                    icon="AlertTriangle",
                )
            )
        elif spent > budget * thresholds.BUDGET_WARNING_RATIO:
            used = spent / budget * 100
            alerts.append(
                BudgetAlert(
                    type="info",
                    title=f"Approaching {category} Budget",
                    message=(
                        f"You're at {used:.1f}% of your {category} budget. "
                        f"Spent {_money(spent)} of {_format_budget(budget)}."
                    ),
                    icon="TrendingUp",
                )
            )
    return alerts


def evaluate_transactions(
    transactions: Iterable[Transaction],
    budgets: Mapping[str, float] = DEFAULT_BUDGETS,
    thresholds: Type[Thresholds] = Thresholds,
) -> Tuple[List[Insight], List[BudgetAlert]]:
    """
    Run every rule over one transaction snapshot.

    Returns the rule-based insights and the budget alerts, each in emission
    order. An empty snapshot, or one without expenses, yields no insights.
    """
    summary = summarize_spending(transactions)
    return (
        build_rule_insights(summary, thresholds),
        build_budget_alerts(summary, budgets, thresholds),
    )


def build_fallback_recommendations(
    summary: SpendingSummary, thresholds: Type[Thresholds] = Thresholds
) -> List[Recommendation]:
    """Locally computed suggestions shown when the model offers none."""
    total = summary.total_expenses
    if total == 0:
        return []

    recommendations: List[Recommendation] = []

    food = summary.category_total(FOOD_CATEGORY)
    if food > total * thresholds.FOOD_SPENDING_RATIO:
        estimate = food * thresholds.SAVINGS_ESTIMATE_RATIO
        recommendations.append(
            Recommendation(
                title="Meal Planning",
                description=(
                    f"Based on your food spending "
                    f"({summary.share_of_expenses(food):.1f}% of expenses), "
                    "implementing a weekly meal plan could save you approximately "
                    f"{CURRENCY_SYMBOL}{estimate:.0f} per month."
                ),
                potential_savings=f"{CURRENCY_SYMBOL}{estimate:.0f}/month",
            )
        )

    entertainment = summary.category_total(ENTERTAINMENT_CATEGORY)
    if entertainment > total * thresholds.ENTERTAINMENT_SPENDING_RATIO:
        recommendations.append(
            Recommendation(
                title="Entertainment Alternatives",
                description=(
                    "Consider free or low-cost entertainment options like community "
                    "events, libraries, or home activities."
                ),
                potential_savings=(
                    f"{CURRENCY_SYMBOL}{entertainment:.0f}/month potential"
                ),
            )
        )

    savings_rate = summary.savings_rate
    if savings_rate is not None and savings_rate < thresholds.SAVINGS_RATE_LOW:
        recommendations.append(
            Recommendation(
                title="Savings Goal",
                description=(
                    "Set up automatic transfers to a savings account to build an "
                    "emergency fund."
                ),
                potential_savings="Ongoing",
            )
        )

    if not recommendations:
        recommendations.append(
            Recommendation(
                title="Review Budget",
                description=(
                    "Consider reviewing your spending patterns for optimization "
                    "opportunities."
                ),
                potential_savings="TBD",
            )
        )

    return recommendations
