from functools import lru_cache

from app.core import config
from app.infrastructure.implementation.fireworks_client import (
    FireworksCompletionClient,
)
from app.infrastructure.implementation.transaction_repository import (
    TransactionRepository,
)
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository
from app.services.implementation.insight_service import InsightService
from app.services.implementation.report_service import ReportService
from app.services.implementation.transaction_service import TransactionService
from app.services.interfaces.insight_service import IInsightService
from app.services.interfaces.report_service import IReportService
from app.services.interfaces.transaction_service import ITransactionService


# Dependency Injection
@lru_cache(maxsize=1)
def get_transaction_repository() -> ITransactionRepository:
    return TransactionRepository()


@lru_cache(maxsize=1)
def get_insight_service() -> IInsightService:
    return InsightService(
        get_transaction_repository(),
        FireworksCompletionClient(),
        chat_client=FireworksCompletionClient(max_tokens=config.LLM_CHAT_MAX_TOKENS),
    )


@lru_cache(maxsize=1)
def get_transaction_service() -> ITransactionService:
    return TransactionService(get_transaction_repository())


@lru_cache(maxsize=1)
def get_report_service() -> IReportService:
    return ReportService(get_transaction_repository())
