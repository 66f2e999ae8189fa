"""
Audit log and dashboard endpoints. Read-only.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cbs_backend.models.base import get_db
from cbs_backend.services.audit_service import AuditService
from cbs_backend.schemas.audit import AuditLogResponse, DashboardSummary

router = APIRouter(tags=["Audit"])


@router.get("/audit", response_model=list[AuditLogResponse])
def list_audit_logs(db: Session = Depends(get_db)):
    """The 100 most recent audit rows, newest first."""
    return AuditService(db).recent_logs()


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(db: Session = Depends(get_db)):
    """Customer, account and balance totals plus today's activity."""
    return AuditService(db).dashboard_summary()
