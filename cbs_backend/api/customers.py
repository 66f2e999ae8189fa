"""
Customer API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cbs_backend.models.base import get_db
from cbs_backend.services.customer_service import CustomerService
from cbs_backend.schemas.customer import (
    CustomerCreate,
    CustomerCreated,
    CustomerResponse,
)

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    """All customers, newest first."""
    return CustomerService(db).list_customers()


@router.post("", response_model=CustomerCreated)
def add_customer(
    request: CustomerCreate,
    db: Session = Depends(get_db),
):
    """Add a customer. Name and CNIC are required."""
    service = CustomerService(db)
    try:
        customer = service.create_customer(request)
        db.commit()
        return CustomerCreated(customer_id=customer.id)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
