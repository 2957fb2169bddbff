import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from finledger.core.config import DATABASE_URL, SQL_ECHO
from finledger.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=echo, **kwargs)


engine = build_engine(DATABASE_URL, echo=SQL_ECHO)


def create_db_and_tables(bind=None):
    import finledger.models  # noqa: F401  registers every table on the metadata

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit on success, roll back on any error.

    Storage exceptions leave as DatabaseError; everything else is re-raised
    untouched after the rollback.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("database operation failed: %s", exc.__class__.__name__, exc_info=exc)
        raise DatabaseError(exc) from exc
    except Exception:
        session.rollback()
        raise
