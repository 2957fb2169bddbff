from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from finledger.models.enums import TransactionType


class TransactionCreate(BaseModel):
    type: TransactionType
    category_id: str = Field(..., validation_alias=AliasChoices("category_id", "categoryId"))
    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)
    description: Optional[str] = Field(default="", max_length=255)
    date: Optional[datetime] = None


class TransactionUpdate(TransactionCreate):
    pass


class TransactionRead(BaseModel):
    id: str
    type: TransactionType
    category_id: str
    investment_id: Optional[str] = None
    amount: float
    description: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionPage(BaseModel):
    items: List[TransactionRead]
    total: int
    page: int
    page_size: int
    total_pages: int
