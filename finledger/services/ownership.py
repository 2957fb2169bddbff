"""Ownership guard shared by every entity-scoped operation."""
import logging
from typing import Type, TypeVar

from sqlmodel import Session, SQLModel

from finledger.core.errors import NOT_FOUND_BY_RESOURCE, NotFoundError, ResourceNotOwned

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def belongs_to_user(session: Session, model: Type[SQLModel], entity_id: str, user_id: str) -> bool:
    entity = session.get(model, entity_id)
    return entity is not None and entity.user_id == user_id


def get_owned(session: Session, model: Type[ModelT], entity_id: str, user_id: str) -> ModelT:
    """Load an entity for the acting user.

    Raises the resource's NotFound when it does not exist and
    ResourceNotOwned when it belongs to someone else.
    """
    resource = model.__tablename__
    entity = session.get(model, entity_id)
    if entity is None:
        raise NOT_FOUND_BY_RESOURCE.get(resource, NotFoundError)()
    if entity.user_id != user_id:
        logger.warning("user %s tried to access %s %s of another user", user_id, resource, entity_id)
        raise ResourceNotOwned(resource, entity_id)
    return entity
