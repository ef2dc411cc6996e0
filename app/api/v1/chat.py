from fastapi import APIRouter, Depends

from app.api.dependencies import get_insight_service
from app.models.chat_dto import ChatRequest, ChatResponse
from app.services.interfaces.insight_service import IInsightService

router = APIRouter()


@router.post("/", response_model=ChatResponse)
def chat(data: ChatRequest, service: IInsightService = Depends(get_insight_service)):
    transactions = [tx.to_domain() for tx in data.transactions]
    return service.chat(data.message, transactions)
