"""add goal table

Revision ID: b3e7a91c4d20
Revises: 5d1f0c2a9b7e
Create Date: 2026-10-20 09:41:07.220194

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b3e7a91c4d20'
down_revision: Union[str, Sequence[str], None] = '5d1f0c2a9b7e'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GOAL_STATUSES = ("ACTIVE", "COMPLETED", "CANCELLED")


def upgrade():
    op.create_table(
        "goal",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("user_id", sa.String(length=26), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("target_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("current_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.Enum(*GOAL_STATUSES, name="goalstatus"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_goal_user_id", "goal", ["user_id"])


def downgrade():
    op.drop_index("ix_goal_user_id", table_name="goal")
    op.drop_table("goal")
    sa.Enum(name="goalstatus").drop(op.get_bind(), checkfirst=True)
