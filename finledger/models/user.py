from datetime import datetime

from sqlmodel import Field, SQLModel

from finledger.models.enums import UserPlan
from finledger.models.types import UTCDateTime
from finledger.utils.dates import utcnow
from finledger.utils.ids import new_id


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True, max_length=26)
    name: str = Field(default="", max_length=100)
    email: str = Field(index=True, unique=True, max_length=100)
    hashed_password: str
    plan: UserPlan = Field(default=UserPlan.FREE)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
