import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from finledger.core.security import get_current_user_id
from finledger.database import get_session
from finledger.models.enums import TransactionType
from finledger.schemas.transaction import TransactionCreate, TransactionPage, TransactionRead, TransactionUpdate
from finledger.services import transactions as movements

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(
    data: TransactionCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return movements.create_transaction(
        session,
        user_id,
        category_id=data.category_id,
        type=data.type,
        amount=data.amount,
        description=data.description or "",
        date=data.date,
    )


@router.get("", response_model=TransactionPage)
@router.get("/", response_model=TransactionPage)
def list_transactions(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
    start_date: Optional[dt.datetime] = Query(None, alias="startDate"),
    end_date: Optional[dt.datetime] = Query(None, alias="endDate"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    investment_id: Optional[str] = Query(None, alias="investmentId"),
    type: Optional[TransactionType] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
):
    items, total = movements.list_transactions(
        session,
        user_id,
        category_id=category_id,
        type=type,
        investment_id=investment_id,
        start_date=start_date,
        end_date=end_date,
        page=page,
        page_size=page_size,
    )
    return TransactionPage(
        items=[TransactionRead.model_validate(t) for t in items],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=max(1, (total + page_size - 1) // page_size),
    )


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return movements.get_transaction(session, transaction_id, user_id)


@router.put("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    transaction_id: str,
    data: TransactionUpdate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return movements.update_transaction(
        session,
        transaction_id,
        user_id,
        category_id=data.category_id,
        amount=data.amount,
        type=data.type,
        description=data.description or "",
        date=data.date,
    )


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    movements.delete_transaction(session, transaction_id, user_id)
    return {"message": "Transaction deleted"}
