"""User directory consulted by the ledger before any mutation."""
import logging
from typing import Optional

from sqlmodel import Session, func, select

from finledger.core.errors import ConflictError, UserNotFound, ValidationError
from finledger.core.security import get_password_hash, verify_password
from finledger.database import transaction
from finledger.models.enums import UserPlan
from finledger.models.user import User

logger = logging.getLogger(__name__)


def user_exists(session: Session, user_id: str) -> bool:
    return session.get(User, user_id) is not None


def get_user_by_id(session: Session, user_id: str) -> User:
    user = session.get(User, user_id)
    if not user:
        raise UserNotFound()
    return user


def ensure_user_exists(session: Session, user_id: str) -> None:
    if not user_exists(session, user_id):
        raise UserNotFound()


def get_user_plan(session: Session, user_id: str) -> UserPlan:
    return get_user_by_id(session, user_id).plan


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(
        select(User).where(func.lower(User.email) == email.strip().lower())
    ).first()


def create_user(
    session: Session,
    *,
    email: str,
    password: str,
    name: str = "",
    plan: UserPlan = UserPlan.FREE,
) -> User:
    email = email.strip().lower()
    if not password:
        raise ValidationError("Password is required.", field="password")
    if get_user_by_email(session, email):
        raise ConflictError("Email already registered.")

    user = User(
        email=email,
        name=name.strip(),
        hashed_password=get_password_hash(password),
        plan=plan,
    )
    with transaction(session):
        session.add(user)
    session.refresh(user)
    logger.info("user %s registered", user.id)
    return user


def authenticate(session: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(session, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
