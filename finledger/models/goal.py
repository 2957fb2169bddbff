from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel

from finledger.models.enums import GoalStatus
from finledger.models.types import UTCDateTime
from finledger.utils.dates import utcnow
from finledger.utils.ids import new_id


class Goal(SQLModel, table=True):
    """A savings target the user tracks by hand."""

    id: str = Field(default_factory=new_id, primary_key=True, max_length=26)
    user_id: str = Field(foreign_key="user.id", index=True, max_length=26)
    name: str = Field(max_length=100)
    target_amount: Decimal = Field(max_digits=14, decimal_places=2)
    current_amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    started_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    ended_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    status: GoalStatus = Field(default=GoalStatus.ACTIVE)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
