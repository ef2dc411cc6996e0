import logging
from typing import List, Optional, Sequence

from app.core.insight_llm import (
    CHAT_SYSTEM_PROMPT,
    INSIGHTS_SYSTEM_PROMPT,
    build_chat_context,
    build_insight_context,
    format_chat_prompt,
    format_insights_prompt,
    parse_llm_response,
)
from app.core.insight_rules import (
    build_budget_alerts,
    build_fallback_recommendations,
    build_rule_insights,
    summarize_spending,
)
from app.domain.transaction import Transaction
from app.infrastructure.interfaces.completion_client import (
    CompletionUnavailableError,
    ICompletionClient,
)
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository
from app.models.chat_dto import ChatResponse
from app.models.insight_dto import (
    BudgetAlert,
    Insight,
    InsightPayload,
    InsightReport,
    Recommendation,
)
from app.services.interfaces.insight_service import IInsightService

logger = logging.getLogger(__name__)

EMPTY_CHAT_REPLY = (
    "I apologize, but I'm having trouble generating a response right now. "
    "Please try again."
)
DEGRADED_CHAT_REPLY = (
    "I apologize, but I'm experiencing technical difficulties. "
    "Please check your API configuration or try again later."
)


def merge_insights(
    rule_insights: Sequence[Insight],
    ai_payload: InsightPayload,
    fallback_recommendations: Sequence[Recommendation],
    budget_alerts: Sequence[BudgetAlert],
) -> InsightReport:
    """
    Combine rule output with model output.

    Rule insights come first, model insights after, neither re-sorted nor
    de-duplicated. Recommendations are the model's when it gave any, otherwise
    the locally computed ones; the two lists are never mixed.
    """
    if ai_payload.recommendations:
        recommendations = list(ai_payload.recommendations)
    else:
        recommendations = list(fallback_recommendations)

    return InsightReport(
        insights=[*rule_insights, *ai_payload.insights],
        recommendations=recommendations,
        budget_alerts=list(budget_alerts),
    )


class InsightService(IInsightService):
    def __init__(
        self,
        transaction_repository: ITransactionRepository,
        completion_client: ICompletionClient,
        chat_client: Optional[ICompletionClient] = None,
    ):
        self.transaction_repository = transaction_repository
        self.completion_client = completion_client
        self.chat_client = chat_client or completion_client

    def _request_insights(self, transactions: Sequence[Transaction]) -> Optional[str]:
        context = build_insight_context(transactions)
        try:
            return self.completion_client.complete(
                INSIGHTS_SYSTEM_PROMPT, format_insights_prompt(context)
            )
        except CompletionUnavailableError as e:
            logger.error(f"Insights API error: {e}")
            return None

    def generate_ai_insights(
        self, transactions: Sequence[Transaction]
    ) -> InsightPayload:
        return parse_llm_response(self._request_insights(transactions))

    def analyze(self, transactions: Sequence[Transaction]) -> InsightReport:
        summary = summarize_spending(transactions)
        rule_insights = build_rule_insights(summary)
        alerts = build_budget_alerts(summary)

        if transactions:
            ai_payload = self.generate_ai_insights(transactions)
        else:
            ai_payload = InsightPayload(insights=[], recommendations=[])

        return merge_insights(
            rule_insights,
            ai_payload,
            build_fallback_recommendations(summary),
            alerts,
        )

    def analyze_user(self, user_id: str) -> InsightReport:
        snapshot: List[Transaction] = self.transaction_repository.get_user_transactions(
            user_id
        )
        logger.info(f"Analyzing {len(snapshot)} transactions for user {user_id}")
        return self.analyze(snapshot)

    def chat(
        self, message: str, transactions: Sequence[Transaction]
    ) -> ChatResponse:
        prompt = format_chat_prompt(build_chat_context(transactions), message)
        try:
            reply = self.chat_client.complete(CHAT_SYSTEM_PROMPT, prompt)
        except CompletionUnavailableError as e:
            logger.error(f"Chat completion error: {e}")
            return ChatResponse(response=DEGRADED_CHAT_REPLY)

        if not reply or not reply.strip():
            logger.error("Empty response from completion service")
            return ChatResponse(response=EMPTY_CHAT_REPLY)
        return ChatResponse(response=reply)
