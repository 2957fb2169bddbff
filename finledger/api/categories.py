from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from finledger.core.security import get_current_user_id
from finledger.database import get_session
from finledger.schemas.category import CategoryCreate, CategoryRead
from finledger.services import categories as directory

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return directory.create_category(session, user_id, data.name, data.icon)


@router.get("", response_model=List[CategoryRead])
@router.get("/", response_model=List[CategoryRead])
def list_categories(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return directory.list_categories(session, user_id)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return directory.get_category(session, category_id, user_id)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: str,
    data: CategoryCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return directory.update_category(session, category_id, user_id, data.name, data.icon)


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    directory.delete_category(session, category_id, user_id)
    return {"message": "Category deleted"}
