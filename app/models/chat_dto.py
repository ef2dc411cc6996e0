from typing import List

from pydantic import BaseModel, Field

from app.models.transaction_dto import TransactionInput


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    transactions: List[TransactionInput]


class ChatResponse(BaseModel):
    response: str
