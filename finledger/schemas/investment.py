from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from finledger.models.enums import InvestmentType


class InvestmentCreate(BaseModel):
    """Body for opening an investment.

    Accepts both snake_case and camelCase spellings for the amount, rate and
    category fields.
    """

    type: InvestmentType
    name: str = Field(..., max_length=100)
    initial_amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=14,
        decimal_places=2,
        validation_alias=AliasChoices("initial_amount", "initialAmount"),
    )
    return_rate: float = Field(default=0.0, validation_alias=AliasChoices("return_rate", "returnRate"))
    category_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("category_id", "categoryId"))


class InvestmentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=100)
    type: Optional[InvestmentType] = None
    return_rate: Optional[float] = Field(default=None, validation_alias=AliasChoices("return_rate", "returnRate"))


class InvestmentMovement(BaseModel):
    """Contribution or withdrawal request."""

    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)
    description: Optional[str] = None
    category_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("category_id", "categoryId"))


class InvestmentRead(BaseModel):
    id: str
    type: InvestmentType
    name: str
    current_balance: float
    return_rate: float
    application_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InvestmentReturnRead(BaseModel):
    profit: float
    return_percentage: float
