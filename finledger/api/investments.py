from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from finledger.core.security import get_current_user_id
from finledger.database import get_session
from finledger.schemas.investment import (
    InvestmentCreate,
    InvestmentMovement,
    InvestmentRead,
    InvestmentReturnRead,
    InvestmentUpdate,
)
from finledger.schemas.transaction import TransactionRead
from finledger.services import investments as ledger
from finledger.services.transactions import list_investment_transactions

router = APIRouter(prefix="/investments", tags=["investments"])


@router.post("", response_model=InvestmentRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=InvestmentRead, status_code=status.HTTP_201_CREATED)
def create_investment(
    data: InvestmentCreate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.create_investment(
        session,
        user_id,
        type=data.type,
        name=data.name,
        initial_amount=data.initial_amount,
        return_rate=data.return_rate,
        category_id=data.category_id,
    )


@router.get("", response_model=List[InvestmentRead])
@router.get("/", response_model=List[InvestmentRead])
def list_investments(
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.list_investments(session, user_id)


@router.get("/{investment_id}", response_model=InvestmentRead)
def get_investment(
    investment_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.get_investment(session, investment_id, user_id)


@router.patch("/{investment_id}", response_model=InvestmentRead)
def update_investment(
    investment_id: str,
    data: InvestmentUpdate,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.update_investment(
        session,
        investment_id,
        user_id,
        name=data.name,
        type=data.type,
        return_rate=data.return_rate,
    )


@router.delete("/{investment_id}")
def delete_investment(
    investment_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    ledger.delete_investment(session, investment_id, user_id)
    return {"message": "Investment deleted"}


@router.post("/{investment_id}/contributions", response_model=TransactionRead)
def make_contribution(
    investment_id: str,
    data: InvestmentMovement,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.make_contribution(
        session, investment_id, user_id, data.amount, data.description, data.category_id
    )


@router.post("/{investment_id}/withdrawals", response_model=TransactionRead)
def make_withdrawal(
    investment_id: str,
    data: InvestmentMovement,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return ledger.make_withdrawal(
        session, investment_id, user_id, data.amount, data.description, data.category_id
    )


@router.get("/{investment_id}/return", response_model=InvestmentReturnRead)
def get_investment_return(
    investment_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    profit, percentage = ledger.calculate_return(session, investment_id, user_id)
    return InvestmentReturnRead(profit=profit, return_percentage=percentage)


@router.get("/{investment_id}/transactions", response_model=List[TransactionRead])
def get_investment_transactions(
    investment_id: str,
    user_id: str = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    return list_investment_transactions(session, investment_id, user_id)
