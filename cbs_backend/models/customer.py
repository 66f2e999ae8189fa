"""
Customer model.

Represents an account holder. A customer can own any
number of accounts.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cbs_backend.models.base import Base


class Customer(Base):
    __tablename__ = "Customer"

    id: Mapped[int] = mapped_column("CustomerID", primary_key=True)
    name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
    cnic: Mapped[str] = mapped_column("CNIC", String(20), nullable=False)
    contact: Mapped[str | None] = mapped_column(
        "Contact", String(20), nullable=True
    )
    gmail: Mapped[str | None] = mapped_column(
        "Gmail", String(100), nullable=True
    )

    accounts: Mapped[list["Account"]] = relationship(back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer {self.id} {self.name}>"
