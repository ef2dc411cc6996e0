from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from app.domain.transaction import Category, Transaction, TransactionType


class TransactionInput(BaseModel):
    """A transaction as supplied by the client for analysis."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    amount: float = Field(allow_inf_nan=False)
    description: str = ""
    category: str
    type: TransactionType
    date: Optional[datetime] = None

    def to_domain(self, user_id: str = "") -> Transaction:
        return Transaction(
            id=self.id,
            user_id=user_id,
            amount=abs(self.amount),
            description=self.description,
            category=self.category,
            type=self.type,
            date=self.date or datetime.now(timezone.utc),
        )


class AnalyzeTransactionsRequest(BaseModel):
    transactions: List[TransactionInput]

    def to_domain(self) -> List[Transaction]:
        return [tx.to_domain() for tx in self.transactions]


class CreateTransactionRequest(BaseModel):
    user_id: str = Field(min_length=1)
    amount: float = Field(allow_inf_nan=False)
    description: str = Field(min_length=1)
    category: Category
    type: TransactionType
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def store_magnitude(cls, value: float) -> float:
        # Sign lives in `type`; amounts are stored as magnitudes
        if value == 0:
            raise ValueError("amount must be non-zero")
        return abs(value)


class UpdateTransactionRequest(BaseModel):
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    description: Optional[str] = None
    category: Optional[Category] = None
    type: Optional[TransactionType] = None
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def store_magnitude(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return value
        if value == 0:
            raise ValueError("amount must be non-zero")
        return abs(value)


class TransactionResponse(BaseModel):
    id: str
    user_id: str
    amount: float
    description: str
    category: str
    type: TransactionType
    date: datetime
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(**transaction.__dict__)
