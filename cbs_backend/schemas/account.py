"""
Pydantic schemas for account operations.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from cbs_backend.models.enums import AccountType


class AccountCreate(BaseModel):
    """
    Request to open an account.

    type is a free-form code: "SAV" opens a Savings account,
    anything else (including nothing) opens a Current account.
    """
    cust_id: int = Field(alias="custID")
    type: str | None = None
    balance: Decimal | None = None

    model_config = ConfigDict(populate_by_name=True)


class AccountCreated(BaseModel):
    success: bool = True
    account_no: int = Field(alias="accountNo")

    model_config = ConfigDict(populate_by_name=True)


class AccountResponse(BaseModel):
    account_no: int = Field(alias="AccountNo")
    customer_id: int = Field(alias="CustID")
    account_type: AccountType = Field(alias="Type")
    balance: Decimal = Field(alias="Balance")
    status: str = Field(alias="Status")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
