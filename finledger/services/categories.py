import logging
from typing import List, Optional

from sqlmodel import Session, func, select

from finledger.constants.categories import SystemCategoryKey
from finledger.core.config import DEFAULT_INVESTMENT_CATEGORY_NAME
from finledger.core.errors import ConflictError, ValidationError
from finledger.database import transaction
from finledger.models.category import Category
from finledger.models.transaction import Transaction
from finledger.services.ownership import get_owned
from finledger.services.users import ensure_user_exists
from finledger.utils.dates import utcnow

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required.", field="name")
    return cleaned


def find_by_name(session: Session, user_id: str, name: str) -> Optional[Category]:
    return session.exec(
        select(Category).where(
            Category.user_id == user_id,
            func.lower(Category.name) == name.strip().lower(),
        )
    ).first()


def _ensure_name_available(session: Session, user_id: str, name: str) -> None:
    if find_by_name(session, user_id, name):
        raise ConflictError(f"Category '{name}' already exists.")


def create_category(session: Session, user_id: str, name: str, icon: Optional[str] = None) -> Category:
    ensure_user_exists(session, user_id)
    name = _clean_name(name)
    _ensure_name_available(session, user_id, name)

    category = Category(user_id=user_id, name=name, icon=icon, is_system=False, system_key=None)
    with transaction(session):
        session.add(category)
    session.refresh(category)
    return category


def get_category(session: Session, category_id: str, user_id: str) -> Category:
    ensure_user_exists(session, user_id)
    return get_owned(session, Category, category_id, user_id)


def list_categories(session: Session, user_id: str) -> List[Category]:
    ensure_user_exists(session, user_id)
    return session.exec(
        select(Category).where(Category.user_id == user_id).order_by(Category.name)
    ).all()


def update_category(
    session: Session,
    category_id: str,
    user_id: str,
    name: str,
    icon: Optional[str] = None,
) -> Category:
    """Rename a category and set its icon.

    System categories may be renamed too; the name stays unique per user.
    """
    ensure_user_exists(session, user_id)
    category = get_owned(session, Category, category_id, user_id)
    name = _clean_name(name)

    if name.lower() != category.name.lower():
        _ensure_name_available(session, user_id, name)

    category.name = name
    category.icon = icon
    category.updated_at = utcnow()
    with transaction(session):
        session.add(category)
    session.refresh(category)
    return category


def delete_category(session: Session, category_id: str, user_id: str) -> None:
    ensure_user_exists(session, user_id)
    category = get_owned(session, Category, category_id, user_id)

    if category.is_system:
        raise ValidationError("System categories cannot be deleted.")

    in_use = session.exec(
        select(func.count(Transaction.id)).where(Transaction.category_id == category_id)
    ).one()
    if in_use:
        raise ValidationError("Category has transactions and cannot be deleted.")

    with transaction(session):
        session.delete(category)


def validate_category(session: Session, category_id: str, user_id: str) -> Category:
    """Category a movement is about to reference; must exist and be the user's."""
    return get_owned(session, Category, category_id, user_id)


def _adopt_by_name_if_exists(
    session: Session,
    user_id: str,
    name: str,
    key: SystemCategoryKey,
) -> Optional[Category]:
    """Promote a same-named user category to the system category for ``key``."""
    existing = session.exec(
        select(Category).where(
            Category.user_id == user_id,
            func.lower(Category.name) == name.lower(),
            Category.system_key == None,  # noqa: E711
        )
    ).first()

    if existing:
        existing.is_system = True
        existing.system_key = key.value
        existing.updated_at = utcnow()
        with transaction(session):
            session.add(existing)
        session.refresh(existing)
        return existing
    return None


def get_or_create_system_category(
    session: Session,
    user_id: str,
    *,
    key: SystemCategoryKey,
    default_name: str,
) -> Category:
    """Look up by system_key, else adopt by name, else create.

    Idempotent per (user_id, system_key), which is also unique in the table.
    """
    category = session.exec(
        select(Category).where(
            Category.user_id == user_id,
            Category.system_key == key.value,
        )
    ).first()
    if category:
        return category

    adopted = _adopt_by_name_if_exists(session, user_id, default_name, key)
    if adopted:
        return adopted

    category = Category(
        user_id=user_id,
        name=default_name,
        is_system=True,
        system_key=key.value,
    )
    with transaction(session):
        session.add(category)
    session.refresh(category)
    logger.info("created default %s category for user %s", key.value, user_id)
    return category


def ensure_default_category(session: Session, user_id: str) -> str:
    """Id of the user's investment category, created on first use."""
    ensure_user_exists(session, user_id)
    category = get_or_create_system_category(
        session,
        user_id,
        key=SystemCategoryKey.INVESTMENT,
        default_name=DEFAULT_INVESTMENT_CATEGORY_NAME,
    )
    return category.id
