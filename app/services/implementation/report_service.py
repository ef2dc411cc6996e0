import logging
import re
from typing import Optional, Sequence

import pandas as pd
from fastapi import HTTPException

from app.core.budget_config import DISPLAY_CURRENCY_SYMBOL, USD_TO_PHP
from app.domain.transaction import Transaction
from app.infrastructure.interfaces.transaction_repository import ITransactionRepository
from app.models.report_dto import CategoryTotal, MonthlyReportResponse, MonthlyTotals
from app.services.interfaces.report_service import IReportService

logger = logging.getLogger(__name__)

HISTORY_MONTHS = 6
MONTH_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])")


def transactions_to_df(transactions: Sequence[Transaction]) -> pd.DataFrame:
    if not transactions:
        return pd.DataFrame(columns=["date", "month", "type", "category", "amount"])

    df = pd.DataFrame(
        [
            {
                "date": tx.date,
                "type": tx.type.value,
                "category": tx.category,
                "amount": tx.magnitude * USD_TO_PHP,
            }
            for tx in transactions
        ]
    )
    df["date"] = pd.to_datetime(df["date"], utc=True)
    df["month"] = df["date"].dt.strftime("%Y-%m")
    return df


def build_monthly_report(
    user_id: str,
    transactions: Sequence[Transaction],
    month: Optional[str] = None,
    history_months: int = HISTORY_MONTHS,
) -> MonthlyReportResponse:
    """
    Summarize a snapshot in display currency.

    Totals and the category breakdown cover ``month`` (YYYY-MM) when given,
    otherwise the whole snapshot. The history always spans the latest
    ``history_months`` months present, oldest first.
    """
    df = transactions_to_df(transactions)
    if df.empty:
        return MonthlyReportResponse(
            user_id=user_id,
            month=month,
            currency=DISPLAY_CURRENCY_SYMBOL,
            total_income=0.0,
            total_expenses=0.0,
            net=0.0,
            categories=[],
            history=[],
        )

    period = df[df["month"] == month] if month else df

    expenses = period[period["type"] == "expense"]
    total_income = float(period.loc[period["type"] == "income", "amount"].sum())
    total_expenses = float(expenses["amount"].sum())

    by_category = (
        expenses.groupby("category", sort=False)["amount"]
        .sum()
        .sort_values(ascending=False, kind="stable")
    )

    monthly = (
        df.groupby(["month", "type"])["amount"]
        .sum()
        .unstack(fill_value=0)
        .sort_index()
        .tail(history_months)
    )
    history = [
        MonthlyTotals(
            month=str(label),
            income=float(row.get("income", 0.0)),
            expenses=float(row.get("expense", 0.0)),
        )
        for label, row in monthly.iterrows()
    ]

    return MonthlyReportResponse(
        user_id=user_id,
        month=month,
        currency=DISPLAY_CURRENCY_SYMBOL,
        total_income=round(total_income, 2),
        total_expenses=round(total_expenses, 2),
        net=round(total_income - total_expenses, 2),
        categories=[
            CategoryTotal(category=str(name), amount=round(float(amount), 2))
            for name, amount in by_category.items()
        ],
        history=history,
    )


class ReportService(IReportService):
    def __init__(self, transaction_repository: ITransactionRepository):
        self.transaction_repository = transaction_repository

    def get_monthly_report(
        self, user_id: str, month: Optional[str] = None
    ) -> MonthlyReportResponse:
        if month is not None and not MONTH_PATTERN.fullmatch(month):
            raise HTTPException(
                status_code=400, detail="month must be in YYYY-MM format"
            )
        transactions = self.transaction_repository.get_user_transactions(user_id)
        logger.info(
            f"Building monthly report for user {user_id} from {len(transactions)} transactions"
        )
        return build_monthly_report(user_id, transactions, month)
