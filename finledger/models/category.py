from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from finledger.models.types import UTCDateTime
from finledger.utils.dates import utcnow
from finledger.utils.ids import new_id

if TYPE_CHECKING:
    from finledger.models.transaction import Transaction


class Category(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("user_id", "system_key", name="uq_category_user_system_key"),
    )
    id: str = Field(default_factory=new_id, primary_key=True, max_length=26)
    user_id: str = Field(foreign_key="user.id", index=True, max_length=26)
    name: str = Field(max_length=100)
    icon: Optional[str] = Field(default=None, max_length=50)

    # Categories the ledger creates on its own (e.g. the default investment one)
    is_system: bool = Field(default=False, index=True)
    system_key: Optional[str] = Field(default=None, index=True, max_length=64)

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    transactions: List["Transaction"] = Relationship(back_populates="category")
