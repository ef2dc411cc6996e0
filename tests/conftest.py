from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from app.domain.transaction import Transaction, TransactionType
from app.infrastructure.interfaces.completion_client import (
    CompletionUnavailableError,
    ICompletionClient,
)
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository


class FakeCompletionClient(ICompletionClient):
    """Returns canned text, or raises when built with an error."""

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, str]] = []

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append({"system": system_prompt, "user": user_prompt})
        if self.error is not None:
            raise self.error
        return self.reply


class InMemoryTransactionRepository(ITransactionRepository):
    def __init__(self, transactions: Optional[List[Transaction]] = None):
        self.transactions: List[Transaction] = list(transactions or [])

    def create_transaction(self, transaction):
        self.transactions.append(transaction)
        return transaction

    def get_user_transactions(self, user_id):
        return [tx for tx in self.transactions if tx.user_id == user_id]

    def update_transaction(self, transaction):
        for i, tx in enumerate(self.transactions):
            if tx.id == transaction.id and tx.user_id == transaction.user_id:
                self.transactions[i] = transaction
                return transaction
        return None

    def delete_transaction(self, user_id, transaction_id):
        before = len(self.transactions)
        self.transactions = [
            tx
            for tx in self.transactions
            if not (tx.id == transaction_id and tx.user_id == user_id)
        ]
        return len(self.transactions) < before


@pytest.fixture
def make_tx():
    """Build a domain Transaction with sensible defaults."""
    counter = {"n": 0}

    def _make(
        amount: float,
        type: str = "expense",
        category: str = "Other",
        description: str = "",
        date: Optional[datetime] = None,
        user_id: str = "user-1",
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=f"tx-{counter['n']}",
            user_id=user_id,
            amount=amount,
            description=description or f"{category} purchase",
            category=category,
            type=TransactionType(type),
            date=date or datetime(2024, 5, 10, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def unreachable_client():
    return FakeCompletionClient(error=CompletionUnavailableError("connection refused"))


@pytest.fixture
def fake_client():
    """Factory for FakeCompletionClient instances."""
    return FakeCompletionClient


@pytest.fixture
def repository():
    return InMemoryTransactionRepository()
