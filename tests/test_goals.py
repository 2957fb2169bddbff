"""Tests for savings goals."""
import datetime as dt
from decimal import Decimal

import pytest

from finledger.core.errors import GoalNotFound, ResourceNotOwned, UserNotFound, ValidationError
from finledger.core.security import get_current_user_id
from finledger.models.enums import GoalStatus
from finledger.services import goals
from finledger.utils.ids import new_id

UTC = dt.timezone.utc


def test_create_goal(session, user):
    goal = goals.create_goal(session, user.id, " Trip to Lisbon ", Decimal("8000"), dt.datetime(2030, 6, 1))

    assert goal.name == "Trip to Lisbon"
    assert goal.target_amount == Decimal("8000")
    assert goal.current_amount == Decimal("0")
    assert goal.status == GoalStatus.ACTIVE
    assert goal.ended_at == dt.datetime(2030, 6, 1, tzinfo=UTC)
    assert goal.started_at.tzinfo == UTC


@pytest.mark.parametrize("target", [Decimal("0"), Decimal("-10")])
def test_create_goal_requires_positive_target(session, user, target):
    with pytest.raises(ValidationError):
        goals.create_goal(session, user.id, "Car", target)


def test_create_goal_rejects_past_deadline(session, user):
    with pytest.raises(ValidationError) as exc_info:
        goals.create_goal(session, user.id, "Car", Decimal("100"), dt.datetime(2000, 1, 1))
    assert exc_info.value.details == {"field": "ended_at"}


def test_create_goal_for_unknown_user(session):
    with pytest.raises(UserNotFound):
        goals.create_goal(session, new_id(), "Car", Decimal("100"))


def test_update_goal(session, user):
    goal = goals.create_goal(session, user.id, "Emergency fund", Decimal("5000"))

    updated = goals.update_goal(
        session,
        goal.id,
        user.id,
        target_amount=Decimal("6000"),
        current_amount=Decimal("6000"),
        status=GoalStatus.COMPLETED,
    )

    assert updated.name == "Emergency fund"
    assert updated.target_amount == Decimal("6000")
    assert updated.current_amount == Decimal("6000")
    assert updated.status == GoalStatus.COMPLETED


def test_update_goal_validates_fields(session, user):
    goal = goals.create_goal(session, user.id, "Laptop", Decimal("3000"))

    with pytest.raises(ValidationError):
        goals.update_goal(session, goal.id, user.id, name="  ")
    with pytest.raises(ValidationError):
        goals.update_goal(session, goal.id, user.id, current_amount=Decimal("-1"))
    with pytest.raises(ValidationError):
        goals.update_goal(session, goal.id, user.id, ended_at=dt.datetime(2000, 1, 1))

    assert goals.get_goal(session, goal.id, user.id).name == "Laptop"


def test_goals_are_scoped_to_owner(session, user, other_user):
    goal = goals.create_goal(session, user.id, "House", Decimal("100000"))

    with pytest.raises(ResourceNotOwned):
        goals.get_goal(session, goal.id, other_user.id)
    with pytest.raises(ResourceNotOwned):
        goals.update_goal(session, goal.id, other_user.id, name="Mine")
    with pytest.raises(ResourceNotOwned):
        goals.delete_goal(session, goal.id, other_user.id)
    assert goals.list_goals(session, other_user.id) == []


def test_delete_goal(session, user):
    goal = goals.create_goal(session, user.id, "Bike", Decimal("900"))

    goals.delete_goal(session, goal.id, user.id)

    with pytest.raises(GoalNotFound):
        goals.get_goal(session, goal.id, user.id)


def test_goal_routes(client, user, other_user):
    created = client.post("/goals", json={"name": "Trip", "target": 1500, "end_at": "2031-01-01T00:00:00Z"})
    assert created.status_code == 201
    goal_id = created.json()["id"]
    assert created.json()["status"] == "ACTIVE"

    patched = client.patch(f"/goals/{goal_id}", json={"currentAmount": 300})
    assert patched.status_code == 200
    assert patched.json()["current_amount"] == 300
    assert patched.json()["target_amount"] == 1500

    assert [g["id"] for g in client.get("/goals").json()] == [goal_id]
    assert client.post("/goals", json={"name": "Bad", "target": 0}).status_code == 422

    client.app.dependency_overrides[get_current_user_id] = lambda: other_user.id
    assert client.get(f"/goals/{goal_id}").json() == {"error": "GOAL_NOT_FOUND", "message": "Goal not found."}

    assert client.delete(f"/goals/{goal_id}").status_code == 404

    client.app.dependency_overrides[get_current_user_id] = lambda: user.id
    assert client.delete(f"/goals/{goal_id}").status_code == 200
    assert client.get("/goals").json() == []
