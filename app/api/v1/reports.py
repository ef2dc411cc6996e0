from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_report_service
from app.models.report_dto import MonthlyReportResponse
from app.services.interfaces.report_service import IReportService

router = APIRouter()


@router.get("/{user_id}/monthly", response_model=MonthlyReportResponse)
def monthly_report(
    user_id: str,
    month: Optional[str] = Query(None, description="YYYY-MM"),
    service: IReportService = Depends(get_report_service),
):
    return service.get_monthly_report(user_id, month)
