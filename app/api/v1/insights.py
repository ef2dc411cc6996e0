from fastapi import APIRouter, Depends

from app.api.dependencies import get_insight_service
from app.models.insight_dto import InsightPayload, InsightReport
from app.models.transaction_dto import AnalyzeTransactionsRequest
from app.services.interfaces.insight_service import IInsightService

router = APIRouter()


@router.post("/", response_model=InsightPayload)
def generate_insights(
    data: AnalyzeTransactionsRequest,
    service: IInsightService = Depends(get_insight_service),
):
    return service.generate_ai_insights(data.to_domain())


@router.post("/analyze", response_model=InsightReport)
def analyze_transactions(
    data: AnalyzeTransactionsRequest,
    service: IInsightService = Depends(get_insight_service),
):
    return service.analyze(data.to_domain())


@router.get("/{user_id}", response_model=InsightReport)
def analyze_user(
    user_id: str, service: IInsightService = Depends(get_insight_service)
):
    return service.analyze_user(user_id)
