"""
Transaction service: deposits, withdrawals, and transfers.

Each operation:
1. Makes exactly one call into the procedure layer
2. Reads back the affected account(s) with the owner's name

The procedure layer owns the balance arithmetic and its
rules. A refusal there surfaces as ProcedureError and nothing
has been applied. The caller controls the commit.
"""

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from cbs_backend.config import get_settings
from cbs_backend.models.account import Account
from cbs_backend.models.customer import Customer
from cbs_backend.schemas.transaction import (
    AccountSnapshot,
    DepositRequest,
    DepositResponse,
    WithdrawalRequest,
    WithdrawalResponse,
    TransferRequest,
    TransferResponse,
)
from cbs_backend.services.procedures import get_procedure_gateway

logger = logging.getLogger(__name__)


# Method tags passed to the procedures
DEPOSIT_METHOD = "Cash"
WITHDRAW_METHOD = "Counter"


class TransactionService:

    def __init__(self, db: Session, gateway=None):
        self.db = db
        self.gateway = gateway or get_procedure_gateway(db)

    @staticmethod
    def _acting_user(user: str | None) -> str:
        return user or get_settings().DEFAULT_USER

    def snapshot(self, account_no: int) -> AccountSnapshot | None:
        """Current balance and owner name, or None if the account is gone."""
        row = self.db.execute(
            select(Account.account_no, Account.balance, Customer.name)
            .join(Customer, Account.customer_id == Customer.id)
            .where(Account.account_no == account_no)
        ).first()
        if row is None:
            return None
        return AccountSnapshot(
            account_no=row.account_no,
            name=row.name,
            new_balance=Decimal(row.balance),
        )

    def deposit(self, request: DepositRequest) -> DepositResponse:
        user = self._acting_user(request.user)
        result = self.gateway.deposit(
            request.account_no, request.amount, DEPOSIT_METHOD, user
        )
        logger.info(
            "Deposit of %s into %s by %s", request.amount, request.account_no, user
        )
        return DepositResponse(
            message=result.message,
            receiver=self.snapshot(request.account_no),
        )

    def withdraw(self, request: WithdrawalRequest) -> WithdrawalResponse:
        user = self._acting_user(request.user)
        result = self.gateway.withdraw(
            request.account_no, request.amount, WITHDRAW_METHOD, user
        )
        logger.info(
            "Withdrawal of %s from %s by %s", request.amount, request.account_no, user
        )
        return WithdrawalResponse(
            message=result.message,
            sender=self.snapshot(request.account_no),
        )

    def transfer(self, request: TransferRequest) -> TransferResponse:
        user = self._acting_user(request.user)
        result = self.gateway.transfer(
            request.from_account, request.to_account, request.amount, user
        )
        logger.info(
            "Transfer of %s from %s to %s by %s",
            request.amount, request.from_account, request.to_account, user,
        )
        return TransferResponse(
            message=result.message,
            sender=self.snapshot(request.from_account),
            receiver=self.snapshot(request.to_account),
        )
