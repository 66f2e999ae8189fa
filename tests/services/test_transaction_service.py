"""
Tests for the TransactionService running on the inline
procedure gateway.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import select

from cbs_backend.models.account import Account
from cbs_backend.models.audit_log import AuditLog
from cbs_backend.services.account_service import AccountService
from cbs_backend.services.customer_service import CustomerService
from cbs_backend.services.procedures import ProcedureError
from cbs_backend.services.transaction_service import (
    TransactionService,
    DEPOSIT_METHOD,
    WITHDRAW_METHOD,
)
from cbs_backend.schemas.account import AccountCreate
from cbs_backend.schemas.customer import CustomerCreate
from cbs_backend.schemas.transaction import (
    DepositRequest,
    ProcedureResult,
    WithdrawalRequest,
    TransferRequest,
)


def open_account(db_session, name="Test User", type_code="SAV", balance="0"):
    """Helper: create a customer with one funded account."""
    customer = CustomerService(db_session).create_customer(
        CustomerCreate(name=name, cnic=f"cnic-{name}")
    )
    account = AccountService(db_session).open_account(AccountCreate(
        cust_id=customer.id, type=type_code, balance=Decimal(balance),
    ))
    db_session.commit()
    return account.account_no


def read_balance(db_session, account_no):
    """Independent read of an account's stored balance."""
    db_session.expire_all()
    return db_session.get(Account, account_no).balance


# --- Deposit Tests ---

class TestDeposit:

    def test_deposit_reports_receiver(self, db_session):
        account_no = open_account(db_session, "Ali", balance="100")
        service = TransactionService(db_session)

        result = service.deposit(DepositRequest(
            account_no=account_no, amount=Decimal("250.50"), user="teller1",
        ))
        db_session.commit()

        assert result.success is True
        assert result.receiver.account_no == account_no
        assert result.receiver.name == "Ali"
        assert result.receiver.new_balance == Decimal("350.50")

    def test_reported_balance_matches_read_back(self, db_session):
        account_no = open_account(db_session, balance="1000")
        service = TransactionService(db_session)

        result = service.deposit(DepositRequest(
            account_no=account_no, amount=Decimal("500"),
        ))
        db_session.commit()

        assert result.receiver.new_balance == read_balance(db_session, account_no)

    def test_unknown_account_fails(self, db_session):
        service = TransactionService(db_session)
        with pytest.raises(ProcedureError, match="does not exist"):
            service.deposit(DepositRequest(account_no=404, amount=Decimal("10")))

    @pytest.mark.parametrize("amount", ["0", "-5", "0.001", "1e30"])
    def test_invalid_amount_fails(self, db_session, amount):
        account_no = open_account(db_session, balance="100")
        service = TransactionService(db_session)

        with pytest.raises(ProcedureError, match="Invalid amount"):
            service.deposit(DepositRequest(
                account_no=account_no, amount=Decimal(amount),
            ))
        db_session.rollback()
        assert read_balance(db_session, account_no) == Decimal("100")

    def test_sub_cent_amount_writes_no_audit_rows(self, db_session):
        account_no = open_account(db_session, balance="100")
        service = TransactionService(db_session)

        with pytest.raises(ProcedureError):
            service.deposit(DepositRequest(
                account_no=account_no, amount=Decimal("0.004"),
            ))
        db_session.rollback()
        logs = db_session.execute(select(AuditLog)).scalars().all()
        assert logs == []

    def test_inactive_account_fails(self, db_session):
        account_no = open_account(db_session, balance="100")
        db_session.get(Account, account_no).status = "Frozen"
        db_session.commit()

        with pytest.raises(ProcedureError, match="not active"):
            TransactionService(db_session).deposit(DepositRequest(
                account_no=account_no, amount=Decimal("10"),
            ))

    def test_default_user_recorded_in_audit(self, db_session):
        account_no = open_account(db_session)
        TransactionService(db_session).deposit(DepositRequest(
            account_no=account_no, amount=Decimal("10"),
        ))
        db_session.commit()

        users = db_session.execute(select(AuditLog.user)).scalars().all()
        assert users and set(users) == {"system"}


# --- Withdrawal Tests ---

class TestWithdrawal:

    def test_withdrawal_reports_sender(self, db_session):
        account_no = open_account(db_session, "Sana", balance="1000")

        result = TransactionService(db_session).withdraw(WithdrawalRequest(
            account_no=account_no, amount=Decimal("300"), user="teller2",
        ))
        db_session.commit()

        assert result.sender.name == "Sana"
        assert result.sender.new_balance == Decimal("700.00")
        assert read_balance(db_session, account_no) == Decimal("700.00")

    def test_savings_cannot_go_negative(self, db_session):
        account_no = open_account(db_session, balance="100")

        with pytest.raises(ProcedureError, match="Insufficient funds"):
            TransactionService(db_session).withdraw(WithdrawalRequest(
                account_no=account_no, amount=Decimal("100.01"),
            ))
        db_session.rollback()
        assert read_balance(db_session, account_no) == Decimal("100")

    def test_current_account_may_use_overdraft(self, db_session):
        account_no = open_account(db_session, type_code="CUR", balance="100")

        result = TransactionService(db_session).withdraw(WithdrawalRequest(
            account_no=account_no, amount=Decimal("5100"),
        ))
        db_session.commit()

        assert result.sender.new_balance == Decimal("-5000.00")

    def test_current_account_beyond_overdraft_fails(self, db_session):
        account_no = open_account(db_session, type_code="CUR", balance="100")

        with pytest.raises(ProcedureError, match="Insufficient funds"):
            TransactionService(db_session).withdraw(WithdrawalRequest(
                account_no=account_no, amount=Decimal("5100.01"),
            ))


# --- Transfer Tests ---

class TestTransfer:

    def test_transfer_moves_amount(self, db_session):
        sender_no = open_account(db_session, "Alice", balance="1000")
        receiver_no = open_account(db_session, "Bob", balance="200")

        result = TransactionService(db_session).transfer(TransferRequest(
            from_account=sender_no, to_account=receiver_no,
            amount=Decimal("500"), user="alice",
        ))
        db_session.commit()

        assert result.sender.new_balance == Decimal("500.00")
        assert result.receiver.new_balance == Decimal("700.00")
        assert result.sender.name == "Alice"
        assert result.receiver.name == "Bob"
        assert read_balance(db_session, sender_no) == Decimal("500.00")
        assert read_balance(db_session, receiver_no) == Decimal("700.00")

    def test_insufficient_funds_changes_neither_account(self, db_session):
        sender_no = open_account(db_session, "Alice", balance="100")
        receiver_no = open_account(db_session, "Bob", balance="200")

        with pytest.raises(ProcedureError, match="Insufficient funds"):
            TransactionService(db_session).transfer(TransferRequest(
                from_account=sender_no, to_account=receiver_no,
                amount=Decimal("500"),
            ))
        db_session.rollback()

        assert read_balance(db_session, sender_no) == Decimal("100")
        assert read_balance(db_session, receiver_no) == Decimal("200")

    def test_unknown_destination_changes_nothing(self, db_session):
        sender_no = open_account(db_session, "Alice", balance="1000")

        with pytest.raises(ProcedureError, match="does not exist"):
            TransactionService(db_session).transfer(TransferRequest(
                from_account=sender_no, to_account=9999, amount=Decimal("10"),
            ))
        db_session.rollback()
        assert read_balance(db_session, sender_no) == Decimal("1000")

    def test_same_account_rejected(self, db_session):
        account_no = open_account(db_session, balance="1000")

        with pytest.raises(ProcedureError, match="same account"):
            TransactionService(db_session).transfer(TransferRequest(
                from_account=account_no, to_account=account_no,
                amount=Decimal("10"),
            ))


# --- Gateway contract ---

class TestSingleProcedureCall:

    def test_transfer_is_one_gateway_call(self, db_session):
        gateway = MagicMock()
        gateway.transfer.return_value = ProcedureResult(message="ok")
        service = TransactionService(db_session, gateway=gateway)

        result = service.transfer(TransferRequest(
            from_account=1, to_account=2, amount=Decimal("5"),
        ))

        gateway.transfer.assert_called_once_with(1, 2, Decimal("5"), "system")
        gateway.deposit.assert_not_called()
        gateway.withdraw.assert_not_called()
        assert result.message == "ok"
        # Neither account exists, so both read-backs are null
        assert result.sender is None
        assert result.receiver is None

    def test_method_tags(self, db_session):
        gateway = MagicMock()
        gateway.deposit.return_value = ProcedureResult()
        gateway.withdraw.return_value = ProcedureResult()
        service = TransactionService(db_session, gateway=gateway)

        service.deposit(DepositRequest(account_no=1, amount=Decimal("1"), user="u"))
        service.withdraw(WithdrawalRequest(account_no=1, amount=Decimal("1"), user="u"))

        gateway.deposit.assert_called_once_with(1, Decimal("1"), DEPOSIT_METHOD, "u")
        gateway.withdraw.assert_called_once_with(1, Decimal("1"), WITHDRAW_METHOD, "u")
        assert (DEPOSIT_METHOD, WITHDRAW_METHOD) == ("Cash", "Counter")
