"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from cbs_backend.models.base import Base
from cbs_backend.models.enums import AccountType, AccountStatus, AuditOperation
from cbs_backend.models.customer import Customer
from cbs_backend.models.account import Account, SavingAccount, CurrentAccount
from cbs_backend.models.audit_log import AuditLog

__all__ = [
    "Base",
    "AccountType",
    "AccountStatus",
    "AuditOperation",
    "Customer",
    "Account",
    "SavingAccount",
    "CurrentAccount",
    "AuditLog",
]
