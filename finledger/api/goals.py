from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from finledger.core.security import get_current_user_id
from finledger.database import get_session
from finledger.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from finledger.services import goals

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
def create_goal(
    data: GoalCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return goals.create_goal(session, user_id, data.name, data.target_amount, data.ended_at)


@router.get("", response_model=List[GoalRead])
@router.get("/", response_model=List[GoalRead])
def list_goals(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return goals.list_goals(session, user_id)


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return goals.get_goal(session, goal_id, user_id)


@router.patch("/{goal_id}", response_model=GoalRead)
def update_goal(
    goal_id: str,
    data: GoalUpdate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return goals.update_goal(
        session,
        goal_id,
        user_id,
        name=data.name,
        target_amount=data.target_amount,
        current_amount=data.current_amount,
        ended_at=data.ended_at,
        status=data.status,
    )


@router.delete("/{goal_id}")
def delete_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    goals.delete_goal(session, goal_id, user_id)
    return {"message": "Goal deleted"}
