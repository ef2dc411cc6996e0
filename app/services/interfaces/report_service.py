from abc import ABC, abstractmethod
from typing import Optional
from app.models.report_dto import MonthlyReportResponse


class IReportService(ABC):
    @abstractmethod
    def get_monthly_report(
        self, user_id: str, month: Optional[str] = None
    ) -> MonthlyReportResponse:
        pass
