from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from finledger.models.enums import UserPlan


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    name: Optional[str] = ""
    plan: UserPlan = UserPlan.FREE


class UserRead(BaseModel):
    id: str
    email: EmailStr
    name: str
    plan: UserPlan

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
