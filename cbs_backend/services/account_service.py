"""
Account service: opens and lists customer accounts.

Opening an account writes two rows: the Account itself and
its type-specific companion (SavingAccount or CurrentAccount).
Both are flushed into the same session, so the caller's single
commit makes the pair all-or-nothing.
"""

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from cbs_backend.models.account import Account, SavingAccount, CurrentAccount
from cbs_backend.models.customer import Customer
from cbs_backend.models.enums import AccountType
from cbs_backend.schemas.account import AccountCreate

logger = logging.getLogger(__name__)


SAVINGS_TYPE_CODE = "SAV"

# Companion row defaults. Not settable per request.
DEFAULT_INTEREST_RATE = Decimal("3.50")
DEFAULT_OVERDRAFT_LIMIT = Decimal("5000.00")


def resolve_account_type(type_code: str | None) -> AccountType:
    """"SAV" is Savings; every other code, or none, is Current."""
    if type_code == SAVINGS_TYPE_CODE:
        return AccountType.SAVINGS
    return AccountType.CURRENT


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def list_accounts(self) -> list[Account]:
        """All accounts, newest account number first."""
        accounts = self.db.execute(
            select(Account).order_by(Account.account_no.desc())
        ).scalars().all()
        return list(accounts)

    def get_account(self, account_no: int) -> Account:
        account = self.db.get(Account, account_no)
        if not account:
            raise ValueError(f"Account {account_no} not found")
        return account

    def open_account(self, request: AccountCreate) -> Account:
        """Open an account and its companion row."""
        customer = self.db.get(Customer, request.cust_id)
        if not customer:
            raise ValueError(f"Customer {request.cust_id} not found")

        account_type = resolve_account_type(request.type)
        account = Account(
            customer_id=customer.id,
            account_type=account_type,
            balance=request.balance or Decimal("0.00"),
        )
        self.db.add(account)
        self.db.flush()

        if account_type == AccountType.SAVINGS:
            self.db.add(SavingAccount(
                account_no=account.account_no,
                interest_rate=DEFAULT_INTEREST_RATE,
            ))
        else:
            self.db.add(CurrentAccount(
                account_no=account.account_no,
                overdraft_limit=DEFAULT_OVERDRAFT_LIMIT,
            ))
        self.db.flush()

        logger.info(
            "Account %s opened for customer %s (%s)",
            account.account_no, customer.id, account_type.value,
        )
        return account
