"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cbs_backend.models.base import get_db
from cbs_backend.services.account_service import AccountService
from cbs_backend.schemas.account import (
    AccountCreate,
    AccountCreated,
    AccountResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(db: Session = Depends(get_db)):
    """All accounts, newest first."""
    return AccountService(db).list_accounts()


@router.post("", response_model=AccountCreated)
def open_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Open an account.

    The account row and its Savings/Current companion row
    are committed together.
    """
    service = AccountService(db)
    try:
        account = service.open_account(request)
        db.commit()
        return AccountCreated(account_no=account.account_no)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{account_no}", response_model=AccountResponse)
def get_account(
    account_no: int,
    db: Session = Depends(get_db),
):
    """Get a single account."""
    service = AccountService(db)
    try:
        return service.get_account(account_no)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
