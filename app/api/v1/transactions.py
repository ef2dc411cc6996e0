from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencies import get_transaction_service
from app.models.transaction_dto import (
    CreateTransactionRequest,
    TransactionResponse,
    UpdateTransactionRequest,
)
from app.services.interfaces.transaction_service import ITransactionService

router = APIRouter()


@router.get("/", response_model=List[TransactionResponse])
def list_transactions(
    user_id: str = Query(..., min_length=1),
    service: ITransactionService = Depends(get_transaction_service),
):
    return service.get_transactions_by_user_id(user_id)


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: CreateTransactionRequest,
    service: ITransactionService = Depends(get_transaction_service),
):
    created = service.create_transaction(data)
    if not created:
        raise HTTPException(status_code=400, detail="Transaction creation failed")
    return created


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    data: UpdateTransactionRequest,
    user_id: str = Query(..., min_length=1),
    service: ITransactionService = Depends(get_transaction_service),
):
    updated = service.update_transaction(user_id, transaction_id, data)
    if not updated:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return updated


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    user_id: str = Query(..., min_length=1),
    service: ITransactionService = Depends(get_transaction_service),
):
    if not service.delete_transaction(user_id, transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
