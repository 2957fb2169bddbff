"""create ledger tables

Revision ID: 5d1f0c2a9b7e
Revises:
Create Date: 2026-10-19 10:12:40.512031

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d1f0c2a9b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_PLANS = ("FREE", "BASIC", "PRO")
TRANSACTION_TYPES = ("RECEIPT", "EXPENSE", "TRANSFER", "GOALS", "INVESTMENT", "WITHDRAW")
INVESTMENT_TYPES = ("CDB", "LCI", "LCA", "TESOURO_DIRETO", "ACOES", "FUNDOS", "CRIPTOMOEDAS", "PREVIDENCIA")


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("plan", sa.Enum(*USER_PLANS, name="userplan"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "category",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("user_id", sa.String(length=26), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("icon", sa.String(length=50), nullable=True),
        sa.Column("is_system", sa.Boolean(), nullable=False),
        sa.Column("system_key", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "system_key", name="uq_category_user_system_key"),
    )
    op.create_index("ix_category_user_id", "category", ["user_id"])
    op.create_index("ix_category_is_system", "category", ["is_system"])
    op.create_index("ix_category_system_key", "category", ["system_key"])

    op.create_table(
        "investment",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("user_id", sa.String(length=26), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("type", sa.Enum(*INVESTMENT_TYPES, name="investmenttype"), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("current_balance", sa.Numeric(14, 2), nullable=False),
        sa.Column("return_rate", sa.Float(), nullable=False),
        sa.Column("application_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "name", name="uq_investment_user_name"),
    )
    op.create_index("ix_investment_user_id", "investment", ["user_id"])

    op.create_table(
        "transaction",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("user_id", sa.String(length=26), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("type", sa.Enum(*TRANSACTION_TYPES, name="transactiontype"), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category_id", sa.String(length=26), sa.ForeignKey("category.id"), nullable=False),
        sa.Column("investment_id", sa.String(length=26), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_transaction_user_id", "transaction", ["user_id"])
    op.create_index("ix_transaction_category_id", "transaction", ["category_id"])
    op.create_index("ix_transaction_investment_id", "transaction", ["investment_id"])


def downgrade():
    op.drop_index("ix_transaction_investment_id", table_name="transaction")
    op.drop_index("ix_transaction_category_id", table_name="transaction")
    op.drop_index("ix_transaction_user_id", table_name="transaction")
    op.drop_table("transaction")
    op.drop_index("ix_investment_user_id", table_name="investment")
    op.drop_table("investment")
    op.drop_index("ix_category_system_key", table_name="category")
    op.drop_index("ix_category_is_system", table_name="category")
    op.drop_index("ix_category_user_id", table_name="category")
    op.drop_table("category")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
    sa.Enum(name="transactiontype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="investmenttype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userplan").drop(op.get_bind(), checkfirst=True)
