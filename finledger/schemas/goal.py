from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from finledger.models.enums import GoalStatus


class GoalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    target_amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=14,
        decimal_places=2,
        validation_alias=AliasChoices("target_amount", "targetAmount", "target"),
    )
    ended_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("ended_at", "endedAt", "end_at")
    )


class GoalUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=100)
    target_amount: Optional[Decimal] = Field(
        default=None,
        gt=0,
        max_digits=14,
        decimal_places=2,
        validation_alias=AliasChoices("target_amount", "targetAmount", "target"),
    )
    current_amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=14,
        decimal_places=2,
        validation_alias=AliasChoices("current_amount", "currentAmount"),
    )
    ended_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("ended_at", "endedAt", "end_at")
    )
    status: Optional[GoalStatus] = None


class GoalRead(BaseModel):
    id: str
    name: str
    target_amount: float
    current_amount: float
    started_at: datetime
    ended_at: Optional[datetime] = None
    status: GoalStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
