from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from finledger.models.enums import TransactionType
from finledger.models.types import UTCDateTime
from finledger.utils.dates import utcnow
from finledger.utils.ids import new_id

if TYPE_CHECKING:
    from finledger.models.category import Category


class Transaction(SQLModel, table=True):
    """One dated movement in the append-only log."""

    id: str = Field(default_factory=new_id, primary_key=True, max_length=26)
    user_id: str = Field(foreign_key="user.id", index=True, max_length=26)
    type: TransactionType
    amount: Decimal = Field(max_digits=14, decimal_places=2)
    description: str = Field(default="", max_length=255)
    date: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    category_id: str = Field(foreign_key="category.id", index=True, max_length=26)
    category: Optional["Category"] = Relationship(back_populates="transactions")

    # Only set for INVESTMENT / WITHDRAW movements. No foreign key: the
    # history outlives the investment.
    investment_id: Optional[str] = Field(default=None, index=True, max_length=26)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
