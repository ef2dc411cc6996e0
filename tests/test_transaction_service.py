"""
Tests for transaction CRUD through the service layer.
"""

from datetime import datetime, timezone

from app.domain.transaction import Category, TransactionType
from app.models.transaction_dto import (
    CreateTransactionRequest,
    UpdateTransactionRequest,
)
from app.services.implementation.transaction_service import TransactionService


class TestTransactionService:
    """Create, list, update and delete against an in-memory repository."""

    def test_create_stores_magnitude(self, repository):
        service = TransactionService(repository)

        created = service.create_transaction(
            CreateTransactionRequest(
                user_id="user-1",
                amount=-42.5,
                description="Groceries",
                category=Category.FOOD_AND_DINING,
                type=TransactionType.EXPENSE,
                date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            )
        )

        assert created.amount == 42.5
        assert created.category == "Food & Dining"
        assert repository.transactions[0].amount == 42.5
        assert repository.transactions[0].created_at is not None

    def test_list_is_scoped_to_user(self, repository, make_tx):
        repository.transactions = [
            make_tx(10, user_id="user-1"),
            make_tx(20, user_id="user-2"),
        ]

        result = TransactionService(repository).get_transactions_by_user_id("user-1")

        assert [tx.amount for tx in result] == [10]

    def test_update_applies_only_given_fields(self, repository, make_tx):
        tx = make_tx(10, category="Other")
        repository.transactions = [tx]

        updated = TransactionService(repository).update_transaction(
            "user-1",
            tx.id,
            UpdateTransactionRequest(amount=-15, category=Category.SHOPPING),
        )

        assert updated.amount == 15
        assert updated.category == "Shopping"
        assert updated.description == tx.description

    def test_update_unknown_transaction(self, repository):
        result = TransactionService(repository).update_transaction(
            "user-1", "missing", UpdateTransactionRequest(amount=1)
        )

        assert result is None

    def test_delete(self, repository, make_tx):
        tx = make_tx(10)
        repository.transactions = [tx]
        service = TransactionService(repository)

        assert service.delete_transaction("user-2", tx.id) is False
        assert service.delete_transaction("user-1", tx.id) is True
        assert repository.transactions == []
