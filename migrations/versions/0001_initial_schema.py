"""Initial schema: customers, accounts, companion rows, audit log

The balance procedures (sp_deposit, sp_withdraw, sp_transfer)
are installed separately by the database team.

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "Customer",
        sa.Column("CustomerID", sa.Integer(), primary_key=True),
        sa.Column("Name", sa.String(100), nullable=False),
        sa.Column("CNIC", sa.String(20), nullable=False),
        sa.Column("Contact", sa.String(20), nullable=True),
        sa.Column("Gmail", sa.String(100), nullable=True),
    )
    op.create_table(
        "Account",
        sa.Column("AccountNo", sa.Integer(), primary_key=True),
        sa.Column(
            "CustomerID",
            sa.Integer(),
            sa.ForeignKey("Customer.CustomerID"),
            nullable=False,
        ),
        sa.Column(
            "Type",
            sa.Enum(
                "Savings", "Current",
                name="account_type_enum",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column(
            "Balance", sa.Numeric(15, 2), nullable=False, server_default="0.00"
        ),
        sa.Column(
            "Status", sa.String(20), nullable=False, server_default="Active"
        ),
    )
    op.create_index("ix_Account_CustomerID", "Account", ["CustomerID"])
    op.create_table(
        "SavingAccount",
        sa.Column(
            "AccountNo",
            sa.Integer(),
            sa.ForeignKey("Account.AccountNo"),
            primary_key=True,
        ),
        sa.Column("InterestRate", sa.Numeric(5, 2), nullable=False),
    )
    op.create_table(
        "CurrentAccount",
        sa.Column(
            "AccountNo",
            sa.Integer(),
            sa.ForeignKey("Account.AccountNo"),
            primary_key=True,
        ),
        sa.Column("OverdraftLimit", sa.Numeric(15, 2), nullable=False),
    )
    op.create_table(
        "AuditLog",
        sa.Column("LogID", sa.Integer(), primary_key=True),
        sa.Column("Operation", sa.String(50), nullable=False),
        sa.Column("TableAffected", sa.String(50), nullable=True),
        sa.Column("RecordID", sa.String(50), nullable=True),
        sa.Column("User", sa.String(100), nullable=True),
        sa.Column("DateTime", sa.DateTime(), nullable=False),
        sa.Column("Details", sa.Text(), nullable=True),
    )
    op.create_index("ix_AuditLog_DateTime", "AuditLog", ["DateTime"])


def downgrade() -> None:
    op.drop_index("ix_AuditLog_DateTime", table_name="AuditLog")
    op.drop_table("AuditLog")
    op.drop_table("CurrentAccount")
    op.drop_table("SavingAccount")
    op.drop_index("ix_Account_CustomerID", table_name="Account")
    op.drop_table("Account")
    op.drop_table("Customer")
