"""Movement log: the append-only record of dated financial events."""
import datetime as dt
import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlmodel import Session, func, select

from finledger.core.errors import ResourceNotOwned, ValidationError
from finledger.database import transaction
from finledger.models.enums import INVESTMENT_MOVEMENT_TYPES, TransactionType
from finledger.models.investment import Investment
from finledger.models.transaction import Transaction
from finledger.services.categories import ensure_default_category, validate_category
from finledger.services.ownership import belongs_to_user, get_owned
from finledger.services.users import ensure_user_exists
from finledger.utils.dates import normalize_dt, utcnow

logger = logging.getLogger(__name__)

__all__ = [
    "build_movement",
    "create_transaction",
    "delete_transaction",
    "ensure_default_category",
    "get_transaction",
    "list_investment_transactions",
    "list_transactions",
    "sum_amount",
    "update_transaction",
]


def _check_amount(amount: Decimal) -> Decimal:
    if amount is None or amount <= 0:
        raise ValidationError("Amount must be greater than 0.", field="amount")
    return amount


def build_movement(
    *,
    user_id: str,
    type: TransactionType,
    amount: Decimal,
    category_id: str,
    description: str = "",
    date: Optional[dt.datetime] = None,
    investment_id: Optional[str] = None,
) -> Transaction:
    """Unsaved movement with fresh id and timestamps."""
    if investment_id is not None and type not in INVESTMENT_MOVEMENT_TYPES:
        raise ValidationError("Only INVESTMENT or WITHDRAW movements can reference an investment.", field="type")

    now = utcnow()
    return Transaction(
        user_id=user_id,
        type=type,
        amount=_check_amount(amount),
        category_id=category_id,
        description=(description or "").strip(),
        date=normalize_dt(date) if date is not None else now,
        investment_id=investment_id,
        created_at=now,
        updated_at=now,
    )


def create_transaction(
    session: Session,
    user_id: str,
    category_id: str,
    type: TransactionType,
    amount: Decimal,
    description: str = "",
    date: Optional[dt.datetime] = None,
) -> Transaction:
    ensure_user_exists(session, user_id)
    validate_category(session, category_id, user_id)

    movement = build_movement(
        user_id=user_id,
        type=type,
        amount=amount,
        category_id=category_id,
        description=description,
        date=date,
    )
    with transaction(session):
        session.add(movement)
    session.refresh(movement)
    return movement


def get_transaction(session: Session, transaction_id: str, user_id: str) -> Transaction:
    return get_owned(session, Transaction, transaction_id, user_id)


def _ensure_editable(movement: Transaction) -> None:
    # Linked movements are the source of an investment balance; editing or
    # removing them here would make the two disagree.
    if movement.investment_id is not None:
        raise ValidationError(
            "Transactions linked to an investment can only change through contributions or withdrawals."
        )


def update_transaction(
    session: Session,
    transaction_id: str,
    user_id: str,
    *,
    category_id: str,
    amount: Decimal,
    type: TransactionType,
    description: str = "",
    date: Optional[dt.datetime] = None,
) -> Transaction:
    ensure_user_exists(session, user_id)
    movement = get_owned(session, Transaction, transaction_id, user_id)
    _ensure_editable(movement)

    _check_amount(amount)
    validate_category(session, category_id, user_id)

    movement.category_id = category_id
    movement.amount = amount
    movement.type = type
    movement.description = (description or "").strip()
    if date is not None:
        movement.date = normalize_dt(date)
    movement.updated_at = utcnow()

    with transaction(session):
        session.add(movement)
    session.refresh(movement)
    return movement


def delete_transaction(session: Session, transaction_id: str, user_id: str) -> None:
    movement = get_owned(session, Transaction, transaction_id, user_id)
    _ensure_editable(movement)
    with transaction(session):
        session.delete(movement)


def list_transactions(
    session: Session,
    user_id: str,
    *,
    category_id: Optional[str] = None,
    type: Optional[TransactionType] = None,
    investment_id: Optional[str] = None,
    start_date: Optional[dt.datetime] = None,
    end_date: Optional[dt.datetime] = None,
    page: int = 1,
    page_size: int = 20,
) -> Tuple[List[Transaction], int]:
    """One page of the user's movements, newest first, plus the total count."""
    ensure_user_exists(session, user_id)
    query = select(Transaction).where(Transaction.user_id == user_id)

    if category_id:
        query = query.where(Transaction.category_id == category_id)
    if type:
        query = query.where(Transaction.type == type)
    if investment_id:
        query = query.where(Transaction.investment_id == investment_id)
    if start_date:
        query = query.where(Transaction.date >= normalize_dt(start_date))
    if end_date:
        query = query.where(Transaction.date <= normalize_dt(end_date))

    total = session.exec(select(func.count()).select_from(query.subquery())).one()
    items = session.exec(
        query.order_by(Transaction.date.desc(), Transaction.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    ).all()
    return items, total


def list_investment_transactions(session: Session, investment_id: str, user_id: str) -> List[Transaction]:
    """Movements linked to one investment, newest first.

    History of a deleted investment stays readable by its owner.
    """
    live = session.get(Investment, investment_id) is not None
    if live and not belongs_to_user(session, Investment, investment_id, user_id):
        raise ResourceNotOwned("investment", investment_id)

    return session.exec(
        select(Transaction)
        .where(
            Transaction.investment_id == investment_id,
            Transaction.user_id == user_id,
        )
        .order_by(Transaction.date.desc(), Transaction.id.desc())
    ).all()


def sum_amount(session: Session, investment_id: str, type: TransactionType) -> Decimal:
    total = session.exec(
        select(func.coalesce(func.sum(Transaction.amount), 0)).where(
            Transaction.investment_id == investment_id,
            Transaction.type == type,
        )
    ).one()
    return Decimal(str(total))
