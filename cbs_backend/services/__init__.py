"""Business logic services."""

from cbs_backend.services.customer_service import CustomerService
from cbs_backend.services.account_service import AccountService
from cbs_backend.services.transaction_service import TransactionService
from cbs_backend.services.audit_service import AuditService

__all__ = [
    "CustomerService",
    "AccountService",
    "TransactionService",
    "AuditService",
]
