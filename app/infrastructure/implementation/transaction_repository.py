import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pydantic import TypeAdapter

from app.core.supabase import get_supabase
from app.domain.transaction import Transaction, TransactionType
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository

logger = logging.getLogger(__name__)

TABLE = "transactions"
_TIMESTAMP = TypeAdapter(datetime)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    return _TIMESTAMP.validate_python(value)


def row_to_transaction(row: Dict[str, Any]) -> Transaction:
    try:
        return Transaction(
            id=str(row["id"]),
            user_id=str(row["userId"]),
            amount=abs(float(row["amount"])),
            description=row.get("description") or "",
            category=row["category"],
            type=TransactionType(row["type"]),
            date=_parse_timestamp(row["date"]),
            created_at=_parse_timestamp(row.get("createdAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(
            status_code=500,
            detail=f"Malformed transaction row {row.get('id', '?')}: {e}",
        )


def transaction_to_row(transaction: Transaction) -> Dict[str, Any]:
    return {
        "id": transaction.id,
        "userId": transaction.user_id,
        "amount": transaction.amount,
        "description": transaction.description,
        "category": transaction.category,
        "type": transaction.type.value,
        "date": transaction.date.isoformat(),
    }


class TransactionRepository(ITransactionRepository):
    def __init__(self, client=None):
        self.supabase = client or get_supabase()

    def create_transaction(self, transaction: Transaction) -> Optional[Transaction]:
        try:
            response = (
                self.supabase.table(TABLE)
                .insert(transaction_to_row(transaction))
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create transaction {transaction.id}: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to create transaction: {e}"
            )
        if response.data:
            return row_to_transaction(response.data[0])
        return None

    def get_user_transactions(self, user_id: str) -> List[Transaction]:
        try:
            response = (
                self.supabase.table(TABLE)
                .select("*")
                .eq("userId", user_id)
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Supabase query failed for user {user_id}: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to fetch transactions: {e}"
            )
        rows = response.data or []
        logger.info(f"Fetched {len(rows)} transactions for user {user_id}")
        return [row_to_transaction(row) for row in rows]

    def update_transaction(self, transaction: Transaction) -> Optional[Transaction]:
        row = transaction_to_row(transaction)
        try:
            response = (
                self.supabase.table(TABLE)
                .update(row)
                .eq("id", transaction.id)
                .eq("userId", transaction.user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update transaction {transaction.id}: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to update transaction: {e}"
            )
        if response.data:
            return row_to_transaction(response.data[0])
        return None

    def delete_transaction(self, user_id: str, transaction_id: str) -> bool:
        try:
            response = (
                self.supabase.table(TABLE)
                .delete()
                .eq("id", transaction_id)
                .eq("userId", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete transaction {transaction_id}: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to delete transaction: {e}"
            )
        return bool(response.data)
