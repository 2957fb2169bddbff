import pytest

from finledger.core.errors import InvestmentNotFound, ResourceNotOwned
from finledger.models.category import Category
from finledger.models.investment import Investment
from finledger.services.ownership import belongs_to_user, get_owned
from finledger.utils.ids import new_id


def test_belongs_to_user(session, user, other_user, investment, category):
    assert belongs_to_user(session, Investment, investment.id, user.id) is True
    assert belongs_to_user(session, Investment, investment.id, other_user.id) is False
    assert belongs_to_user(session, Investment, new_id(), user.id) is False
    assert belongs_to_user(session, Category, category.id, user.id) is True


def test_get_owned_distinguishes_missing_from_foreign(session, user, other_user, investment):
    assert get_owned(session, Investment, investment.id, user.id).id == investment.id

    with pytest.raises(InvestmentNotFound):
        get_owned(session, Investment, new_id(), user.id)
    with pytest.raises(ResourceNotOwned) as exc_info:
        get_owned(session, Investment, investment.id, other_user.id)
    assert exc_info.value.resource == "investment"
