"""
Audit service: read-only access to the audit log and the
dashboard figures derived from it.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cbs_backend.models.account import Account
from cbs_backend.models.audit_log import AuditLog
from cbs_backend.models.customer import Customer
from cbs_backend.models.enums import AuditOperation
from cbs_backend.schemas.audit import AuditLogResponse, DashboardSummary


AUDIT_PAGE_SIZE = 100
RECENT_ACTIVITY_SIZE = 5

# Operations that mark a finished, successful transaction
SUCCESS_OPERATIONS = (AuditOperation.COMMIT.value, AuditOperation.SUCCESS.value)


class AuditService:

    def __init__(self, db: Session):
        self.db = db

    def recent_logs(self, limit: int = AUDIT_PAGE_SIZE) -> list[AuditLog]:
        """Newest audit rows first, never more than AUDIT_PAGE_SIZE."""
        limit = min(limit, AUDIT_PAGE_SIZE)
        logs = self.db.execute(
            select(AuditLog)
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .limit(limit)
        ).scalars().all()
        return list(logs)

    def count_successful_transactions(self, day: date) -> int:
        """Audit rows on the given day whose operation marks a success."""
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        return self.db.execute(
            select(func.count(AuditLog.id)).where(
                AuditLog.created_at >= start,
                AuditLog.created_at < end,
                AuditLog.operation.in_(SUCCESS_OPERATIONS),
            )
        ).scalar_one()

    def dashboard_summary(self, today: date | None = None) -> DashboardSummary:
        """
        Headline figures for the dashboard view.

        Recomputed from the database on every call.
        """
        today = today or date.today()
        customer_count = self.db.execute(
            select(func.count(Customer.id))
        ).scalar_one()
        account_count = self.db.execute(
            select(func.count(Account.account_no))
        ).scalar_one()
        total_balance = self.db.execute(
            select(func.coalesce(func.sum(Account.balance), 0))
        ).scalar_one()

        return DashboardSummary(
            customer_count=customer_count,
            account_count=account_count,
            total_balance=Decimal(str(total_balance)).quantize(Decimal("0.01")),
            today_transactions=self.count_successful_transactions(today),
            recent_activity=[
                AuditLogResponse.model_validate(log)
                for log in self.recent_logs(RECENT_ACTIVITY_SIZE)
            ],
        )
