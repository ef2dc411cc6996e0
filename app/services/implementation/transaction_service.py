from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from app.domain.transaction import Transaction
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository
from app.models.transaction_dto import (
    CreateTransactionRequest,
    TransactionResponse,
    UpdateTransactionRequest,
)
from app.services.interfaces.transaction_service import ITransactionService


class TransactionService(ITransactionService):
    def __init__(self, transaction_repository: ITransactionRepository):
        self.transaction_repository = transaction_repository

    def create_transaction(
        self, data: CreateTransactionRequest
    ) -> Optional[TransactionResponse]:
        now = datetime.now(timezone.utc)
        transaction = Transaction(
            id=str(uuid4()),
            user_id=data.user_id,
            amount=data.amount,
            description=data.description,
            category=data.category.value,
            type=data.type,
            date=data.date or now,
            created_at=now,
        )
        created = self.transaction_repository.create_transaction(transaction)
        return TransactionResponse.from_domain(created) if created else None

    def get_transactions_by_user_id(self, user_id: str) -> List[TransactionResponse]:
        txs = self.transaction_repository.get_user_transactions(user_id)
        return [TransactionResponse.from_domain(tx) for tx in txs]

    def update_transaction(
        self, user_id: str, transaction_id: str, data: UpdateTransactionRequest
    ) -> Optional[TransactionResponse]:
        existing = next(
            (
                tx
                for tx in self.transaction_repository.get_user_transactions(user_id)
                if tx.id == transaction_id
            ),
            None,
        )
        if existing is None:
            return None

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "category" in changes:
            changes["category"] = data.category.value
        updated = self.transaction_repository.update_transaction(
            replace(existing, **changes)
        )
        return TransactionResponse.from_domain(updated) if updated else None

    def delete_transaction(self, user_id: str, transaction_id: str) -> bool:
        return self.transaction_repository.delete_transaction(user_id, transaction_id)
