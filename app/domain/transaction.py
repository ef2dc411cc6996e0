from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Category(str, Enum):
    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    HEALTHCARE = "Healthcare"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    PERSONAL_CARE = "Personal Care"
    INSURANCE = "Insurance"
    DEBT_PAYMENTS = "Debt Payments"
    SAVINGS = "Savings"
    INVESTMENTS = "Investments"
    INCOME = "Income"
    OTHER = "Other"


@dataclass
class Transaction:
    id: str
    user_id: str
    amount: float
    description: str
    category: str
    type: TransactionType
    date: datetime
    created_at: Optional[datetime] = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def magnitude(self) -> float:
        return abs(self.amount)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME
