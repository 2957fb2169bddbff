from datetime import datetime
from decimal import Decimal

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from finledger.models.enums import InvestmentType
from finledger.models.types import UTCDateTime
from finledger.utils.dates import utcnow
from finledger.utils.ids import new_id


class Investment(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_investment_user_name"),
    )
    id: str = Field(default_factory=new_id, primary_key=True, max_length=26)
    user_id: str = Field(foreign_key="user.id", index=True, max_length=26)
    type: InvestmentType
    name: str = Field(max_length=100)
    current_balance: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    return_rate: float = 0.0  # percentage, informational only
    application_date: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
