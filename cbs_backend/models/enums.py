"""
Shared enumerations for database models.

Values are the exact strings stored in the database, since
the stored procedures and the dashboard compare against them.
"""

import enum


class AccountType(str, enum.Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"


class AccountStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    FROZEN = "Frozen"
    CLOSED = "Closed"


class AuditOperation(str, enum.Enum):
    """Operation names written to AuditLog.Operation."""
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    COMMIT = "COMMIT"
    ROLLBACK = "ROLLBACK"
    SUCCESS = "Success"


def enum_values(enum_cls):
    """Persist enum values ("Savings") rather than member names ("SAVINGS")."""
    return [member.value for member in enum_cls]
