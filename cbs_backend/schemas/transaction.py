"""
Pydantic schemas for transaction operations.

Amounts are not range-checked here: rejecting a zero or
negative amount is the procedure layer's job, and its
message is what the client gets back.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DepositRequest(BaseModel):
    account_no: int = Field(alias="accountNo")
    amount: Decimal
    user: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class WithdrawalRequest(BaseModel):
    account_no: int = Field(alias="accountNo")
    amount: Decimal
    user: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class TransferRequest(BaseModel):
    from_account: int = Field(alias="fromAccount")
    to_account: int = Field(alias="toAccount")
    amount: Decimal
    user: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class ProcedureResult(BaseModel):
    """The result row a balance procedure returns."""
    message: str | None = None
    new_balance: Decimal | None = None
    sender_new_balance: Decimal | None = None
    receiver_new_balance: Decimal | None = None


class AccountSnapshot(BaseModel):
    """An account's balance and owner as read back after a procedure call."""
    account_no: int = Field(alias="accountNo")
    name: str
    new_balance: Decimal = Field(alias="newBalance")

    model_config = ConfigDict(populate_by_name=True)


class DepositResponse(BaseModel):
    success: bool = True
    message: str | None = None
    receiver: AccountSnapshot | None


class WithdrawalResponse(BaseModel):
    success: bool = True
    message: str | None = None
    sender: AccountSnapshot | None


class TransferResponse(BaseModel):
    success: bool = True
    message: str | None = None
    sender: AccountSnapshot | None
    receiver: AccountSnapshot | None
