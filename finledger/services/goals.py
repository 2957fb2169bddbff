"""Savings goals: a target amount, progress and an optional deadline."""
import datetime as dt
import logging
from decimal import Decimal
from typing import List, Optional

from sqlmodel import Session, select

from finledger.core.errors import ValidationError
from finledger.database import transaction
from finledger.models.enums import GoalStatus
from finledger.models.goal import Goal
from finledger.services.ownership import get_owned
from finledger.services.users import ensure_user_exists
from finledger.utils.dates import normalize_dt, utcnow

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required.", field="name")
    return cleaned


def _check_target(target_amount: Decimal) -> Decimal:
    if target_amount is None or target_amount <= 0:
        raise ValidationError("Target amount must be greater than 0.", field="target_amount")
    return target_amount


def _check_deadline(started_at: dt.datetime, ended_at: Optional[dt.datetime]) -> Optional[dt.datetime]:
    if ended_at is None:
        return None
    ended_at = normalize_dt(ended_at)
    if ended_at < started_at:
        raise ValidationError("End date cannot be before the start date.", field="ended_at")
    return ended_at


def create_goal(
    session: Session,
    user_id: str,
    name: str,
    target_amount: Decimal,
    ended_at: Optional[dt.datetime] = None,
) -> Goal:
    ensure_user_exists(session, user_id)
    name = _clean_name(name)
    _check_target(target_amount)

    now = utcnow()
    goal = Goal(
        user_id=user_id,
        name=name,
        target_amount=target_amount,
        started_at=now,
        ended_at=_check_deadline(now, ended_at),
        status=GoalStatus.ACTIVE,
        created_at=now,
        updated_at=now,
    )
    with transaction(session):
        session.add(goal)
    session.refresh(goal)
    logger.info("goal %s created for user %s", goal.id, user_id)
    return goal


def get_goal(session: Session, goal_id: str, user_id: str) -> Goal:
    ensure_user_exists(session, user_id)
    return get_owned(session, Goal, goal_id, user_id)


def list_goals(session: Session, user_id: str) -> List[Goal]:
    ensure_user_exists(session, user_id)
    return session.exec(
        select(Goal)
        .where(Goal.user_id == user_id)
        .order_by(Goal.started_at.desc(), Goal.id.desc())
    ).all()


def update_goal(
    session: Session,
    goal_id: str,
    user_id: str,
    name: Optional[str] = None,
    target_amount: Optional[Decimal] = None,
    current_amount: Optional[Decimal] = None,
    ended_at: Optional[dt.datetime] = None,
    status: Optional[GoalStatus] = None,
) -> Goal:
    """Apply the given fields; ``None`` leaves a field untouched."""
    goal = get_goal(session, goal_id, user_id)

    if name is not None:
        goal.name = _clean_name(name)
    if target_amount is not None:
        goal.target_amount = _check_target(target_amount)
    if current_amount is not None:
        if current_amount < 0:
            raise ValidationError("Current amount cannot be negative.", field="current_amount")
        goal.current_amount = current_amount
    if ended_at is not None:
        goal.ended_at = _check_deadline(goal.started_at, ended_at)
    if status is not None:
        goal.status = status
    goal.updated_at = utcnow()

    with transaction(session):
        session.add(goal)
    session.refresh(goal)
    return goal


def delete_goal(session: Session, goal_id: str, user_id: str) -> None:
    goal = get_goal(session, goal_id, user_id)
    with transaction(session):
        session.delete(goal)
    logger.info("goal %s deleted", goal_id)
