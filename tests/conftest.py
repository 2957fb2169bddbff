from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from finledger.core.security import get_current_user_id
from finledger.database import build_engine, get_session
from finledger.main import create_app
from finledger.models.enums import InvestmentType
from finledger.services.categories import create_category
from finledger.services.investments import create_investment
from finledger.services.users import create_user
import finledger.models  # noqa: F401


@pytest.fixture
def engine():
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(session):
    return create_user(session, email="ana@example.com", password="secret", name="Ana")


@pytest.fixture
def other_user(session):
    return create_user(session, email="bruno@example.com", password="secret", name="Bruno")


@pytest.fixture
def category(session, user):
    return create_category(session, user.id, "Salary")


@pytest.fixture
def investment(session, user):
    return create_investment(session, user.id, InvestmentType.CDB, "Bank CDB", initial_amount=Decimal("1000"))


@pytest.fixture
def client(session, user):
    """Client acting as ``user``; tests may repoint the override to act as someone else."""
    app = create_app(with_lifespan=False)
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_current_user_id] = lambda: user.id
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(session):
    """Client going through the real bearer-token dependency."""
    app = create_app(with_lifespan=False)
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
