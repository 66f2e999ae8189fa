"""
Procedure gateway: the single entry point to the balance procedures.

Deposits, withdrawals and transfers are each exactly one
gateway call. The gateway never splits a transfer into a
debit and a credit the caller has to coordinate.

Two backends implement the same contract:

- StoredProcedureGateway issues CALL sp_deposit / sp_withdraw /
  sp_transfer. The database procedures own the arithmetic,
  overdraft rules and audit rows.
- InlineProcedureGateway performs the same checks and writes
  in-process, for databases without stored procedures
  (SQLite in tests and local demos).

Both raise ProcedureError with the procedure's message when
the operation is refused. Neither commits; the caller does.
"""

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from cbs_backend.config import get_settings
from cbs_backend.models.account import Account
from cbs_backend.models.audit_log import AuditLog
from cbs_backend.models.enums import AccountStatus, AccountType, AuditOperation
from cbs_backend.schemas.transaction import ProcedureResult

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Largest value a Numeric(15,2) column holds
MAX_AMOUNT = Decimal("9999999999999.99")


class ProcedureError(Exception):
    """A balance procedure refused or failed the operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def driver_message(exc: DBAPIError) -> str:
    """
    Extract the human-readable message from a driver error.

    MySQL drivers carry (errno, message) in args; a SIGNAL
    raised inside a procedure puts its MESSAGE_TEXT there.
    """
    args = getattr(exc.orig, "args", ())
    if len(args) >= 2 and isinstance(args[1], str):
        return args[1]
    return str(exc.orig)


class StoredProcedureGateway:

    def __init__(self, db: Session):
        self.db = db

    def _call(self, procedure: str, params: dict) -> ProcedureResult:
        placeholders = ", ".join(f":{name}" for name in params)
        logger.info("CALL %s(%s)", procedure, params)
        try:
            result = self.db.execute(
                text(f"CALL {procedure}({placeholders})"), params
            )
        except DBAPIError as e:
            message = driver_message(e)
            logger.warning("%s failed: %s", procedure, message)
            raise ProcedureError(message) from e

        if not result.returns_rows:
            return ProcedureResult()
        row = result.mappings().first()
        return ProcedureResult(**dict(row)) if row else ProcedureResult()

    def deposit(
        self, account_no: int, amount: Decimal, method: str, user: str
    ) -> ProcedureResult:
        return self._call("sp_deposit", {
            "account_no": account_no,
            "amount": amount,
            "method": method,
            "user": user,
        })

    def withdraw(
        self, account_no: int, amount: Decimal, method: str, user: str
    ) -> ProcedureResult:
        return self._call("sp_withdraw", {
            "account_no": account_no,
            "amount": amount,
            "method": method,
            "user": user,
        })

    def transfer(
        self, from_account: int, to_account: int, amount: Decimal, user: str
    ) -> ProcedureResult:
        return self._call("sp_transfer", {
            "from_account": from_account,
            "to_account": to_account,
            "amount": amount,
            "user": user,
        })


class InlineProcedureGateway:
    """
    In-process rendition of the balance procedures.

    Every precondition is checked before the first balance
    is touched, so a refused operation leaves nothing to undo.
    Successful changes sit in the caller's transaction until
    it commits.

    Balance floor: 0 for Savings accounts, minus the overdraft
    limit for Current accounts.
    """

    def __init__(self, db: Session):
        self.db = db

    def _lock_account(self, account_no: int) -> Account:
        account = self.db.get(
            Account, account_no, with_for_update=True, populate_existing=True
        )
        if not account:
            raise ProcedureError(f"Account {account_no} does not exist")
        if account.status != AccountStatus.ACTIVE.value:
            raise ProcedureError(
                f"Account {account_no} is not active (status: {account.status})"
            )
        return account

    @staticmethod
    def _check_amount(amount: Decimal) -> Decimal:
        """Round to cents; the rounded amount must fit Balance's Numeric(15,2)."""
        if amount is None:
            raise ProcedureError("Invalid amount: must be greater than zero")
        try:
            amount = Decimal(amount).quantize(CENTS)
        except InvalidOperation:
            raise ProcedureError("Invalid amount: too large")
        if amount <= 0:
            raise ProcedureError("Invalid amount: must be greater than zero")
        if amount > MAX_AMOUNT:
            raise ProcedureError("Invalid amount: too large")
        return amount

    @staticmethod
    def _floor(account: Account) -> Decimal:
        if account.account_type == AccountType.CURRENT and account.current:
            return -account.current.overdraft_limit
        return Decimal("0")

    def _check_funds(self, account: Account, amount: Decimal) -> None:
        if account.balance - amount < self._floor(account):
            raise ProcedureError(
                f"Insufficient funds in account {account.account_no}: "
                f"balance={account.balance}, requested={amount}"
            )

    def _audit(
        self,
        operation: AuditOperation,
        record_id: int,
        user: str,
        details: str,
    ) -> None:
        self.db.add(AuditLog(
            operation=operation.value,
            table_affected="Account",
            record_id=str(record_id),
            user=user,
            details=details,
        ))

    def deposit(
        self, account_no: int, amount: Decimal, method: str, user: str
    ) -> ProcedureResult:
        amount = self._check_amount(amount)
        account = self._lock_account(account_no)

        account.balance = (account.balance + amount).quantize(CENTS)
        self._audit(
            AuditOperation.UPDATE, account_no, user,
            f"Deposit of {amount} via {method}. New balance: {account.balance}",
        )
        self._audit(
            AuditOperation.COMMIT, account_no, user,
            f"Deposit of {amount} completed",
        )
        self.db.flush()
        return ProcedureResult(
            message="Deposit successful", new_balance=account.balance
        )

    def withdraw(
        self, account_no: int, amount: Decimal, method: str, user: str
    ) -> ProcedureResult:
        amount = self._check_amount(amount)
        account = self._lock_account(account_no)
        self._check_funds(account, amount)

        account.balance = (account.balance - amount).quantize(CENTS)
        self._audit(
            AuditOperation.UPDATE, account_no, user,
            f"Withdrawal of {amount} via {method}. New balance: {account.balance}",
        )
        self._audit(
            AuditOperation.COMMIT, account_no, user,
            f"Withdrawal of {amount} completed",
        )
        self.db.flush()
        return ProcedureResult(
            message="Withdrawal successful", new_balance=account.balance
        )

    def transfer(
        self, from_account: int, to_account: int, amount: Decimal, user: str
    ) -> ProcedureResult:
        amount = self._check_amount(amount)
        if from_account == to_account:
            raise ProcedureError("Cannot transfer to the same account")

        # Lock in key order so two opposite transfers cannot deadlock
        first, second = sorted((from_account, to_account))
        locked = {first: self._lock_account(first), second: self._lock_account(second)}
        sender, receiver = locked[from_account], locked[to_account]
        self._check_funds(sender, amount)

        sender.balance = (sender.balance - amount).quantize(CENTS)
        receiver.balance = (receiver.balance + amount).quantize(CENTS)
        self._audit(
            AuditOperation.UPDATE, from_account, user,
            f"Transfer of {amount} to account {to_account}. "
            f"New balance: {sender.balance}",
        )
        self._audit(
            AuditOperation.UPDATE, to_account, user,
            f"Transfer of {amount} from account {from_account}. "
            f"New balance: {receiver.balance}",
        )
        self._audit(
            AuditOperation.COMMIT, from_account, user,
            f"Transfer of {amount} from {from_account} to {to_account} completed",
        )
        self.db.flush()
        return ProcedureResult(
            message="Transfer successful",
            sender_new_balance=sender.balance,
            receiver_new_balance=receiver.balance,
        )


def get_procedure_gateway(db: Session):
    """
    Pick the gateway for the configured PROCEDURE_BACKEND.

    "auto" uses the inline gateway on SQLite, which has no
    stored procedures, and the stored one everywhere else.
    """
    backend = get_settings().PROCEDURE_BACKEND
    if backend == "auto":
        backend = "inline" if db.get_bind().dialect.name == "sqlite" else "stored"

    if backend == "stored":
        return StoredProcedureGateway(db)
    if backend == "inline":
        return InlineProcedureGateway(db)
    raise RuntimeError(f"Unknown PROCEDURE_BACKEND '{backend}'")
