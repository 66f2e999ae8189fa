"""
Transaction API endpoints.

Each endpoint is one procedure call plus a read-back. A
procedure refusal is reported as a 500 carrying the
procedure's own message, and the session is rolled back.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cbs_backend.models.base import get_db
from cbs_backend.services.procedures import ProcedureError
from cbs_backend.services.transaction_service import TransactionService
from cbs_backend.schemas.transaction import (
    DepositRequest,
    DepositResponse,
    WithdrawalRequest,
    WithdrawalResponse,
    TransferRequest,
    TransferResponse,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("/deposit", response_model=DepositResponse)
def deposit(
    request: DepositRequest,
    db: Session = Depends(get_db),
):
    """Deposit money into an account."""
    service = TransactionService(db)
    try:
        result = service.deposit(request)
        db.commit()
        return result
    except ProcedureError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=e.message)


@router.post("/withdraw", response_model=WithdrawalResponse)
def withdraw(
    request: WithdrawalRequest,
    db: Session = Depends(get_db),
):
    """Withdraw money from an account."""
    service = TransactionService(db)
    try:
        result = service.withdraw(request)
        db.commit()
        return result
    except ProcedureError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=e.message)


@router.post("/transfer", response_model=TransferResponse)
def transfer(
    request: TransferRequest,
    db: Session = Depends(get_db),
):
    """Transfer money between two accounts in one procedure call."""
    service = TransactionService(db)
    try:
        result = service.transfer(request)
        db.commit()
        return result
    except ProcedureError as e:
        db.rollback()
        raise HTTPException(status_code=500, detail=e.message)
