"""
Account model and its type-specific companion rows.

Every account has exactly one companion row: a SavingAccount
row holding the interest rate, or a CurrentAccount row holding
the overdraft limit. The balance itself is only ever changed
by the procedure layer.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cbs_backend.models.base import Base
from cbs_backend.models.enums import AccountType, AccountStatus, enum_values


class Account(Base):
    __tablename__ = "Account"

    account_no: Mapped[int] = mapped_column("AccountNo", primary_key=True)
    customer_id: Mapped[int] = mapped_column(
        "CustomerID", ForeignKey("Customer.CustomerID"), nullable=False, index=True
    )
    account_type: Mapped[AccountType] = mapped_column(
        "Type",
        SAEnum(
            AccountType,
            name="account_type_enum",
            values_callable=enum_values,
            create_constraint=True,
        ),
        nullable=False,
    )
    balance: Mapped[Decimal] = mapped_column(
        "Balance", Numeric(15, 2), nullable=False, default=Decimal("0.00")
    )
    status: Mapped[str] = mapped_column(
        "Status", String(20), nullable=False, default=AccountStatus.ACTIVE.value
    )

    customer: Mapped["Customer"] = relationship(back_populates="accounts")
    saving: Mapped["SavingAccount | None"] = relationship(
        back_populates="account", uselist=False
    )
    current: Mapped["CurrentAccount | None"] = relationship(
        back_populates="account", uselist=False
    )

    def __repr__(self) -> str:
        return (
            f"<Account {self.account_no} "
            f"{self.account_type.value} ({self.status})>"
        )


class SavingAccount(Base):
    __tablename__ = "SavingAccount"

    account_no: Mapped[int] = mapped_column(
        "AccountNo", ForeignKey("Account.AccountNo"), primary_key=True
    )
    interest_rate: Mapped[Decimal] = mapped_column(
        "InterestRate", Numeric(5, 2), nullable=False
    )

    account: Mapped["Account"] = relationship(back_populates="saving")


class CurrentAccount(Base):
    __tablename__ = "CurrentAccount"

    account_no: Mapped[int] = mapped_column(
        "AccountNo", ForeignKey("Account.AccountNo"), primary_key=True
    )
    overdraft_limit: Mapped[Decimal] = mapped_column(
        "OverdraftLimit", Numeric(15, 2), nullable=False
    )

    account: Mapped["Account"] = relationship(back_populates="current")
