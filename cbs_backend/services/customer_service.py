"""
Customer service: lists and adds account holders.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from cbs_backend.models.customer import Customer
from cbs_backend.schemas.customer import CustomerCreate

logger = logging.getLogger(__name__)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CustomerService:

    def __init__(self, db: Session):
        self.db = db

    def list_customers(self) -> list[Customer]:
        """All customers, newest identifier first."""
        customers = self.db.execute(
            select(Customer).order_by(Customer.id.desc())
        ).scalars().all()
        return list(customers)

    def create_customer(self, request: CustomerCreate) -> Customer:
        """
        Add a customer.

        Name and CNIC are required and checked before anything
        is written. Contact and Gmail are stored as given,
        including null.
        """
        if _blank(request.name) or _blank(request.cnic):
            raise ValueError("Name and CNIC are required")

        customer = Customer(
            name=request.name,
            cnic=request.cnic,
            contact=request.contact,
            gmail=request.gmail,
        )
        self.db.add(customer)
        self.db.flush()
        logger.info("Customer added: %s", customer.id)
        return customer
