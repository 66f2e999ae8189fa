"""
Pydantic schemas for audit log and dashboard reads.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AuditLogResponse(BaseModel):
    id: int = Field(alias="LogID")
    operation: str = Field(alias="Operation")
    table_affected: str | None = Field(alias="TableAffected")
    record_id: str | None = Field(alias="RecordID")
    user: str | None = Field(alias="UserName")
    created_at: datetime = Field(alias="CreatedAt")
    details: str | None = Field(alias="Details")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class DashboardSummary(BaseModel):
    customer_count: int = Field(alias="customerCount")
    account_count: int = Field(alias="accountCount")
    total_balance: Decimal = Field(alias="totalBalance")
    today_transactions: int = Field(alias="todayTransactions")
    recent_activity: list[AuditLogResponse] = Field(
        alias="recentActivity"
    )

    model_config = ConfigDict(populate_by_name=True)
