from abc import ABC, abstractmethod
from typing import List, Optional
from app.models.transaction_dto import (
    CreateTransactionRequest,
    TransactionResponse,
    UpdateTransactionRequest,
)


class ITransactionService(ABC):
    @abstractmethod
    def create_transaction(
        self, data: CreateTransactionRequest
    ) -> Optional[TransactionResponse]:
        pass

    @abstractmethod
    def get_transactions_by_user_id(self, user_id: str) -> List[TransactionResponse]:
        pass

    @abstractmethod
    def update_transaction(
        self, user_id: str, transaction_id: str, data: UpdateTransactionRequest
    ) -> Optional[TransactionResponse]:
        pass

    @abstractmethod
    def delete_transaction(self, user_id: str, transaction_id: str) -> bool:
        pass
