import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Sequence

from langchain_core.prompts import PromptTemplate
from pydantic import ValidationError

from app.core import config
from app.core.budget_config import CURRENCY_SYMBOL
from app.core.insight_rules import SpendingSummary, summarize_spending
from app.domain.transaction import Transaction
from app.models.insight_dto import Insight, InsightPayload, Recommendation

logger = logging.getLogger(__name__)

INSIGHTS_SYSTEM_PROMPT = """
You are an AI financial analyst for BudgetAI. Analyze the user's transaction data and provide 3-5 personalized financial insights and recommendations.
Focus on spending patterns, savings opportunities, budget optimization, and financial health.
IMPORTANT: Base ALL calculations, amounts, and numbers strictly on the provided transaction data. Do not invent, estimate, or approximate numbers - use only the exact figures from the user's data.
Use the provided totals, category breakdowns, and transaction details for all analysis.
Return insights in JSON format with this structure:
{
  "insights": [
    {
      "type": "warning|info|success",
      "title": "Brief title",
      "message": "Detailed explanation with specific numbers from the user's actual data",
      "icon": "AlertTriangle|Lightbulb|TrendingUp|Brain",
      "color": "text-red-600|text-blue-600|text-green-600|text-purple-600"
    }
  ],
  "recommendations": [
    {
      "title": "Recommendation title",
      "description": "Detailed recommendation based on actual spending patterns",
      "potentialSavings": "Estimated monthly savings based on real data if applicable"
    }
  ]
}
Always include a disclaimer that this is not professional financial advice.
Make insights specific to the user's actual data, not generic.
"""

CHAT_SYSTEM_PROMPT = """
You are a helpful AI financial assistant for the BudgetAI System. Analyze the user's transaction data and provide personalized, accurate financial advice.
You can also help users view, understand, and discuss their financial records and activities within the system.
Always include a disclaimer: "This is not professional financial advice. Consult a qualified advisor for personalized recommendations."
Answer any questions about finances, budgeting, spending, or the user's financial records and activities.
"""

INSIGHTS_PROMPT = PromptTemplate.from_template(
    "Analyze my financial data and provide insights: {context}"
)
CHAT_PROMPT = PromptTemplate.from_template("{context}\n\nUser question: {question}")

TOP_CATEGORY_COUNT = 5


def _money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def _format_categories(categories) -> str:
    return ", ".join(f"{name}: {_money(amount)}" for name, amount in categories)


def _recency_key(tx: Transaction) -> datetime:
    # Naive timestamps are taken as UTC so mixed inputs still compare
    if tx.date.tzinfo is None:
        return tx.date.replace(tzinfo=timezone.utc)
    return tx.date


def _transaction_sample(transactions: Sequence[Transaction], limit: int) -> str:
    newest_first = sorted(transactions, key=_recency_key, reverse=True)
    sample = [
        {
            "id": tx.id,
            "amount": tx.amount,
            "description": tx.description,
            "category": tx.category,
            "type": tx.type.value,
            "date": tx.date.isoformat() if tx.date else None,
        }
        for tx in newest_first[:limit]
    ]
    return json.dumps(sample)


def build_insight_context(
    transactions: Sequence[Transaction],
    summary: Optional[SpendingSummary] = None,
    sample_size: Optional[int] = None,
) -> str:
    summary = summary or summarize_spending(transactions)
    if sample_size is None:
        sample_size = config.RECENT_TRANSACTION_SAMPLE
    ranked = summary.sorted_categories()
    savings_rate = summary.savings_rate or 0.0

    return (
        "User transaction data:\n"
        f"- Total income: {_money(summary.total_income)}\n"
        f"- Total expenses: {_money(summary.total_expenses)}\n"
        f"- Savings rate: {savings_rate:.1f}%\n"
        f"- Number of expense transactions: {summary.expense_count}\n"
        f"- All expense categories: {_format_categories(ranked)}\n"
        f"- Top {TOP_CATEGORY_COUNT} categories: "
        f"{_format_categories(ranked[:TOP_CATEGORY_COUNT])}\n"
        f"- Recent transactions: {_transaction_sample(transactions, sample_size)}"
    )


def build_chat_context(
    transactions: Sequence[Transaction], summary: Optional[SpendingSummary] = None
) -> str:
    summary = summary or summarize_spending(transactions)
    top = summary.sorted_categories()[:TOP_CATEGORY_COUNT]
    return (
        "User transaction data:\n"
        f"- Total income: {_money(summary.total_income)}\n"
        f"- Total expenses: {_money(summary.total_expenses)}\n"
        f"- Number of expense transactions: {summary.expense_count}\n"
        f"- Top categories: {_format_categories(top)}"
    )


class ResponseOutcome(str, Enum):
    OK = "ok"
    MALFORMED = "malformed"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class ParsedResponse:
    outcome: ResponseOutcome
    payload: InsightPayload


# Returned when the model answered but the answer could not be used
CONTENT_FALLBACK = InsightPayload(
    insights=[
        Insight(
            type="info",
            title="Analysis Complete",
            message=(
                "Your financial data has been analyzed. "
                "Check back for detailed insights."
            ),
            icon="Brain",
            color="text-blue-600",
        )
    ],
    recommendations=[
        Recommendation(
            title="Review Your Budget",
            description=(
                "Consider reviewing your spending patterns for optimization "
                "opportunities."
            ),
            potential_savings="TBD",
        )
    ],
)

# Returned when the model could not be reached at all
TRANSPORT_FALLBACK = InsightPayload(
    insights=[
        Insight(
            type="warning",
            title="Analysis Error",
            message=(
                "Unable to generate AI insights at this time. "
                "Please try again later."
            ),
            icon="AlertTriangle",
            color="text-red-600",
        )
    ],
    recommendations=[],
)


def extract_json_block(raw: str) -> str:
    """Return the text between the first '{' and the last '}', or raw unchanged."""
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end < start:
        return raw
    return raw[start : end + 1]


def classify_llm_response(raw: Optional[str]) -> ParsedResponse:
    if raw is None:
        return ParsedResponse(
            ResponseOutcome.UNREACHABLE, TRANSPORT_FALLBACK.model_copy(deep=True)
        )

    candidate = extract_json_block(raw)
    try:
        payload = InsightPayload.model_validate_json(candidate)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Failed to parse AI response: {e}")
        logger.warning(f"Raw response: {raw!r}")
        return ParsedResponse(
            ResponseOutcome.MALFORMED, CONTENT_FALLBACK.model_copy(deep=True)
        )

    return ParsedResponse(ResponseOutcome.OK, payload)


def parse_llm_response(raw: Optional[str]) -> InsightPayload:
    """
    Turn raw model output into an InsightPayload without ever raising.

    ``None`` means the model was never reached and yields the transport
    fallback; anything unparsable yields the content fallback.
    """
    return classify_llm_response(raw).payload


def format_insights_prompt(context: str) -> str:
    return INSIGHTS_PROMPT.format(context=context)


def format_chat_prompt(context: str, question: str) -> str:
    return CHAT_PROMPT.format(context=context, question=question)

