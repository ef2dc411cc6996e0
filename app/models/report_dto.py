from typing import List, Optional

from pydantic import BaseModel


class CategoryTotal(BaseModel):
    category: str
    amount: float


class MonthlyTotals(BaseModel):
    month: str
    income: float
    expenses: float


class MonthlyReportResponse(BaseModel):
    user_id: str
    month: Optional[str] = None
    currency: str
    total_income: float
    total_expenses: float
    net: float
    categories: List[CategoryTotal]
    history: List[MonthlyTotals]
