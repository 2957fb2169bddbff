"""Investment ledger.

Each investment carries a stored ``current_balance`` that moves only
together with a linked movement in the log:

* creation writes the investment and its opening INVESTMENT movement in one
  database transaction, so a failed movement leaves no investment behind;
* contributions and withdrawals insert the movement and change the balance
  in one transaction, the balance through a single conditional ``UPDATE``.
  Concurrent withdrawals are therefore serialized by the database and can
  never take the balance below zero.
"""
import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from finledger.core.errors import ConflictError, DatabaseError, InvestmentNotFound, ValidationError
from finledger.database import transaction
from finledger.models.enums import InvestmentType, TransactionType
from finledger.models.investment import Investment
from finledger.models.transaction import Transaction
from finledger.services.categories import validate_category
from finledger.services.ownership import get_owned
from finledger.services.transactions import build_movement, ensure_default_category, sum_amount
from finledger.services.users import ensure_user_exists
from finledger.utils.dates import utcnow

logger = logging.getLogger(__name__)

OPENING_DESCRIPTION = "Opening contribution - {name}"
CONTRIBUTION_DESCRIPTION = "Contribution"
WITHDRAWAL_DESCRIPTION = "Withdrawal"

HUNDRED = Decimal("100")


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required.", field="name")
    return cleaned


def _check_amount(amount: Decimal) -> Decimal:
    if amount is None or amount <= 0:
        raise ValidationError("Amount must be greater than 0.", field="amount")
    return amount


def _ensure_name_available(session: Session, user_id: str, name: str) -> None:
    clash = session.exec(
        select(Investment.id).where(
            Investment.user_id == user_id,
            func.lower(Investment.name) == name.lower(),
        )
    ).first()
    if clash:
        raise ConflictError(f"Investment '{name}' already exists.")


def _resolve_category(session: Session, user_id: str, category_id: Optional[str]) -> str:
    if category_id:
        return validate_category(session, category_id, user_id).id
    return ensure_default_category(session, user_id)


def create_investment(
    session: Session,
    user_id: str,
    type: InvestmentType,
    name: str,
    initial_amount: Decimal,
    return_rate: float = 0.0,
    category_id: Optional[str] = None,
) -> Investment:
    ensure_user_exists(session, user_id)
    name = _clean_name(name)
    _ensure_name_available(session, user_id, name)
    _check_amount(initial_amount)
    category_id = _resolve_category(session, user_id, category_id)

    now = utcnow()
    investment = Investment(
        user_id=user_id,
        type=type,
        name=name,
        current_balance=initial_amount,
        return_rate=return_rate,
        application_date=now,
        created_at=now,
        updated_at=now,
    )
    investment_id = investment.id
    opening = build_movement(
        user_id=user_id,
        type=TransactionType.INVESTMENT,
        amount=initial_amount,
        category_id=category_id,
        description=OPENING_DESCRIPTION.format(name=name),
        date=now,
        investment_id=investment_id,
    )

    try:
        session.add(investment)
        session.flush()
        record_movement(session, opening)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error(
            "opening movement for investment %s %r (user %s) failed, creation rolled back",
            investment_id,
            name,
            user_id,
            exc_info=exc,
        )
        raise DatabaseError(exc) from exc

    session.refresh(investment)
    logger.info("investment %s created for user %s with %s", investment.id, user_id, initial_amount)
    return investment


def record_movement(session: Session, movement: Transaction) -> Transaction:
    """Stage a movement inside the caller's transaction."""
    session.add(movement)
    session.flush()
    return movement


def get_investment(session: Session, investment_id: str, user_id: str) -> Investment:
    ensure_user_exists(session, user_id)
    return get_owned(session, Investment, investment_id, user_id)


def list_investments(session: Session, user_id: str) -> List[Investment]:
    ensure_user_exists(session, user_id)
    return session.exec(
        select(Investment)
        .where(Investment.user_id == user_id)
        .order_by(Investment.application_date.desc(), Investment.id.desc())
    ).all()


def _apply_movement(
    session: Session,
    investment: Investment,
    user_id: str,
    amount: Decimal,
    movement_type: TransactionType,
    description: str,
    category_id: Optional[str],
) -> Transaction:
    category_id = _resolve_category(session, user_id, category_id)
    movement = build_movement(
        user_id=user_id,
        type=movement_type,
        amount=amount,
        category_id=category_id,
        description=description,
        investment_id=investment.id,
    )

    stmt = update(Investment).where(
        Investment.id == investment.id,
        Investment.user_id == user_id,
    )
    if movement_type == TransactionType.WITHDRAW:
        stmt = stmt.where(Investment.current_balance >= amount).values(
            current_balance=Investment.current_balance - amount,
            updated_at=utcnow(),
        )
    else:
        stmt = stmt.values(
            current_balance=Investment.current_balance + amount,
            updated_at=utcnow(),
        )

    with transaction(session):
        record_movement(session, movement)
        result = session.connection().execute(stmt)
        if result.rowcount != 1:
            if movement_type == TransactionType.WITHDRAW:
                raise ValidationError("Insufficient balance in investment.", field="amount")
            raise InvestmentNotFound()

    session.refresh(investment)
    session.refresh(movement)
    return movement


def make_contribution(
    session: Session,
    investment_id: str,
    user_id: str,
    amount: Decimal,
    description: Optional[str] = None,
    category_id: Optional[str] = None,
) -> Transaction:
    _check_amount(amount)
    investment = get_investment(session, investment_id, user_id)

    movement = _apply_movement(
        session,
        investment,
        user_id,
        amount,
        TransactionType.INVESTMENT,
        (description or "").strip() or CONTRIBUTION_DESCRIPTION,
        category_id,
    )
    logger.info("contribution of %s to investment %s", amount, investment_id)
    return movement


def make_withdrawal(
    session: Session,
    investment_id: str,
    user_id: str,
    amount: Decimal,
    description: Optional[str] = None,
    category_id: Optional[str] = None,
) -> Transaction:
    _check_amount(amount)
    investment = get_investment(session, investment_id, user_id)

    # Early answer for the common case; the conditional update has the last word.
    if investment.current_balance < amount:
        raise ValidationError("Insufficient balance in investment.", field="amount")

    movement = _apply_movement(
        session,
        investment,
        user_id,
        amount,
        TransactionType.WITHDRAW,
        (description or "").strip() or WITHDRAWAL_DESCRIPTION,
        category_id,
    )
    logger.info("withdrawal of %s from investment %s", amount, investment_id)
    return movement


def get_total_invested(session: Session, investment_id: str, user_id: str) -> Decimal:
    """Deposits minus withdrawals, recomputed from the movement log."""
    get_investment(session, investment_id, user_id)
    deposits = sum_amount(session, investment_id, TransactionType.INVESTMENT)
    withdrawals = sum_amount(session, investment_id, TransactionType.WITHDRAW)
    return deposits - withdrawals


def calculate_return(session: Session, investment_id: str, user_id: str) -> Tuple[Decimal, Decimal]:
    investment = get_investment(session, investment_id, user_id)
    total_invested = get_total_invested(session, investment_id, user_id)
    if total_invested == 0:
        return Decimal("0"), Decimal("0")

    profit = investment.current_balance - total_invested
    return profit, profit / total_invested * HUNDRED


def delete_investment(session: Session, investment_id: str, user_id: str) -> None:
    """Delete an emptied investment. Its movements stay in the log."""
    investment = get_investment(session, investment_id, user_id)
    if investment.current_balance != 0:
        raise ValidationError("Cannot delete investment with balance.")

    with transaction(session):
        session.delete(investment)
    logger.info("investment %s deleted", investment_id)


def update_investment(
    session: Session,
    investment_id: str,
    user_id: str,
    name: Optional[str] = None,
    type: Optional[InvestmentType] = None,
    return_rate: Optional[float] = None,
) -> Investment:
    investment = get_investment(session, investment_id, user_id)

    if name is not None:
        name = _clean_name(name)
        if name.lower() != investment.name.lower():
            _ensure_name_available(session, user_id, name)
        investment.name = name
    if type is not None:
        investment.type = type
    if return_rate is not None:
        investment.return_rate = return_rate
    investment.updated_at = utcnow()

    with transaction(session):
        session.add(investment)
    session.refresh(investment)
    return investment
