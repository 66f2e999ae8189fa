"""
Audit log model.

Rows are written by the procedure layer only. This
application reads them; it never updates or deletes one.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from cbs_backend.models.base import Base


class AuditLog(Base):
    __tablename__ = "AuditLog"

    id: Mapped[int] = mapped_column("LogID", primary_key=True)
    operation: Mapped[str] = mapped_column("Operation", String(50), nullable=False)
    table_affected: Mapped[str | None] = mapped_column(
        "TableAffected", String(50), nullable=True
    )
    record_id: Mapped[str | None] = mapped_column(
        "RecordID", String(50), nullable=True
    )
    user: Mapped[str | None] = mapped_column("User", String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "DateTime", DateTime, nullable=False, default=datetime.now, index=True
    )
    details: Mapped[str | None] = mapped_column("Details", Text, nullable=True)

    def __repr__(self) -> str:
        return f"<AuditLog {self.id} {self.operation} {self.table_affected}>"
