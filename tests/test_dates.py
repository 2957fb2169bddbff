"""Tests for timestamp handling."""
import datetime as dt
from decimal import Decimal

from finledger.models.enums import InvestmentType, TransactionType
from finledger.models.investment import Investment
from finledger.models.user import User
from finledger.services.investments import create_investment
from finledger.services.transactions import create_transaction
from finledger.utils.dates import normalize_dt, utcnow

UTC = dt.timezone.utc


def test_utcnow_is_aware():
    assert utcnow().tzinfo is UTC


def test_normalize_dt_variants():
    assert normalize_dt(dt.datetime(2024, 1, 1, 8, 0)) == dt.datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    assert normalize_dt(dt.date(2024, 1, 1)) == dt.datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    assert normalize_dt("2024-01-01T10:00:00Z") == dt.datetime(2024, 1, 1, 10, 0, tzinfo=UTC)
    assert normalize_dt("2024-01-01T10:00:00+02:00") == dt.datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    assert normalize_dt("2024-01-01") == dt.datetime(2024, 1, 1, 0, 0, tzinfo=UTC)
    assert normalize_dt(None).tzinfo is UTC


def test_persisted_timestamps_are_aware_utc(session, user):
    """Rows written and read back keep UTC timestamps on every model."""
    investment = create_investment(session, user.id, InvestmentType.CDB, "Stamped", Decimal("10"))
    session.expire_all()

    stored_user = session.get(User, user.id)
    stored = session.get(Investment, investment.id)
    assert stored_user.created_at.tzinfo == UTC
    assert stored.application_date.tzinfo == UTC
    assert stored.updated_at.tzinfo == UTC


def test_offset_dates_are_stored_in_utc(session, user, category):
    sao_paulo = dt.timezone(dt.timedelta(hours=-3))
    movement = create_transaction(
        session,
        user.id,
        category.id,
        TransactionType.RECEIPT,
        Decimal("10"),
        date=dt.datetime(2024, 6, 30, 23, 0, tzinfo=sao_paulo),
    )
    session.expire_all()

    assert movement.date == dt.datetime(2024, 7, 1, 2, 0, tzinfo=UTC)
