from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from finledger.core.security import create_access_token, get_current_user_id
from finledger.database import get_session
from finledger.schemas.user import Token, UserCreate, UserRead
from finledger.services import users

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    return users.create_user(
        session,
        email=user_create.email,
        password=user_create.password,
        name=user_create.name or "",
        plan=user_create.plan,
    )


@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = users.authenticate(session, form_data.username, form_data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": user.id, "plan": user.plan.value})
    return Token(access_token=access_token)


@router.get("/me", response_model=UserRead)
def read_users_me(user_id: str = Depends(get_current_user_id), session: Session = Depends(get_session)):
    return users.get_user_by_id(session, user_id)
