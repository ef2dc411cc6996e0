from abc import ABC, abstractmethod
from typing import Sequence
from app.domain.transaction import Transaction
from app.models.chat_dto import ChatResponse
from app.models.insight_dto import InsightPayload, InsightReport


class IInsightService(ABC):
    @abstractmethod
    def generate_ai_insights(
        self, transactions: Sequence[Transaction]
    ) -> InsightPayload:
        pass

    @abstractmethod
    def analyze(self, transactions: Sequence[Transaction]) -> InsightReport:
        pass

    @abstractmethod
    def analyze_user(self, user_id: str) -> InsightReport:
        pass

    @abstractmethod
    def chat(
        self, message: str, transactions: Sequence[Transaction]
    ) -> ChatResponse:
        pass
