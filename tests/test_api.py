"""HTTP-level tests: routing, payload shapes and error rendering."""
from finledger.core.security import get_current_user_id
from finledger.utils.ids import new_id


def _open_investment(client, **overrides):
    body = {"type": "CDB", "name": "Bank CDB", "initialAmount": 1000, "returnRate": 11.5}
    body.update(overrides)
    return client.post("/investments", json=body)


def test_create_investment_accepts_camel_case(client):
    response = _open_investment(client)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Bank CDB"
    assert data["current_balance"] == 1000
    assert data["return_rate"] == 11.5


def test_create_investment_accepts_snake_case(client):
    response = client.post(
        "/investments/",
        json={"type": "LCI", "name": "LCI", "initial_amount": "250.75", "return_rate": 9},
    )

    assert response.status_code == 201
    assert response.json()["current_balance"] == 250.75


def test_create_investment_rejects_non_positive_amount(client):
    response = _open_investment(client, initialAmount=0)

    assert response.status_code == 422


def test_duplicate_investment_name_is_conflict(client):
    _open_investment(client)
    response = _open_investment(client, name="bank cdb")

    assert response.status_code == 409
    assert response.json()["error"] == "CONFLICT"


def test_contribution_withdrawal_and_return(client):
    investment_id = _open_investment(client).json()["id"]

    contribution = client.post(f"/investments/{investment_id}/contributions", json={"amount": 500})
    assert contribution.status_code == 200
    assert contribution.json()["type"] == "INVESTMENT"
    assert contribution.json()["investment_id"] == investment_id

    withdrawal = client.post(
        f"/investments/{investment_id}/withdrawals", json={"amount": 200, "description": "Car repair"}
    )
    assert withdrawal.status_code == 200
    assert withdrawal.json()["type"] == "WITHDRAW"
    assert withdrawal.json()["description"] == "Car repair"

    assert client.get(f"/investments/{investment_id}").json()["current_balance"] == 1300

    returns = client.get(f"/investments/{investment_id}/return").json()
    assert returns == {"profit": 0.0, "return_percentage": 0.0}

    history = client.get(f"/investments/{investment_id}/transactions").json()
    assert [m["type"] for m in history] == ["WITHDRAW", "INVESTMENT", "INVESTMENT"]


def test_overdraft_is_bad_request(client):
    investment_id = _open_investment(client).json()["id"]

    response = client.post(f"/investments/{investment_id}/withdrawals", json={"amount": 1000.01})

    assert response.status_code == 400
    assert response.json() == {
        "error": "VALIDATION_ERROR",
        "message": "Insufficient balance in investment.",
        "details": {"field": "amount"},
    }


def test_investment_of_another_user_looks_missing(client, other_user):
    """Foreign resources are reported exactly like missing ones."""
    investment_id = _open_investment(client).json()["id"]

    client.app.dependency_overrides[get_current_user_id] = lambda: other_user.id

    foreign = client.get(f"/investments/{investment_id}")
    missing = client.get(f"/investments/{new_id()}")

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json() == {
        "error": "INVESTMENT_NOT_FOUND",
        "message": "Investment not found.",
    }
    assert client.post(f"/investments/{investment_id}/withdrawals", json={"amount": 1}).status_code == 404
    assert client.get(f"/investments/{investment_id}/transactions").status_code == 404


def test_update_and_delete_investment(client):
    investment_id = _open_investment(client).json()["id"]

    patched = client.patch(f"/investments/{investment_id}", json={"name": "Renamed", "returnRate": 13})
    assert patched.status_code == 200
    assert patched.json()["name"] == "Renamed"
    assert patched.json()["return_rate"] == 13

    refused = client.delete(f"/investments/{investment_id}")
    assert refused.status_code == 400

    client.post(f"/investments/{investment_id}/withdrawals", json={"amount": 1000})
    deleted = client.delete(f"/investments/{investment_id}")
    assert deleted.status_code == 200
    assert client.get("/investments").json() == []

    history = client.get(f"/investments/{investment_id}/transactions")
    assert history.status_code == 200
    assert [m["type"] for m in history.json()] == ["WITHDRAW", "INVESTMENT"]


def test_transaction_routes(client, category):
    created = client.post(
        "/transactions",
        json={"type": "RECEIPT", "categoryId": category.id, "amount": 3200, "date": "2024-03-05T10:00:00Z"},
    )
    assert created.status_code == 201
    transaction_id = created.json()["id"]
    assert created.json()["date"].startswith("2024-03-05T10:00:00")

    updated = client.put(
        f"/transactions/{transaction_id}",
        json={"type": "RECEIPT", "category_id": category.id, "amount": 3300, "description": "Salary"},
    )
    assert updated.status_code == 200
    assert updated.json()["amount"] == 3300

    page = client.get("/transactions", params={"categoryId": category.id, "page_size": 10}).json()
    assert page["total"] == 1
    assert page["total_pages"] == 1
    assert page["items"][0]["description"] == "Salary"

    assert client.delete(f"/transactions/{transaction_id}").status_code == 200
    assert client.get(f"/transactions/{transaction_id}").status_code == 404


def test_transaction_amount_must_be_positive(client, category):
    response = client.post("/transactions", json={"type": "EXPENSE", "categoryId": category.id, "amount": -5})

    assert response.status_code == 422


def test_linked_transaction_cannot_be_deleted(client):
    investment_id = _open_investment(client).json()["id"]
    opening_id = client.get(f"/investments/{investment_id}/transactions").json()[0]["id"]

    response = client.delete(f"/transactions/{opening_id}")

    assert response.status_code == 400


def test_category_routes(client):
    created = client.post("/categories", json={"name": "Travel", "icon": "plane"})
    assert created.status_code == 201
    category_id = created.json()["id"]

    assert client.post("/categories", json={"name": "travel"}).status_code == 409
    assert client.put(f"/categories/{category_id}", json={"name": "Trips"}).json()["name"] == "Trips"
    assert [c["name"] for c in client.get("/categories").json()] == ["Trips"]
    assert client.delete(f"/categories/{category_id}").status_code == 200
    assert client.get(f"/categories/{category_id}").status_code == 404


def test_register_login_and_me(anonymous_client):
    registered = anonymous_client.post(
        "/auth/register", json={"email": "Fabio@Example.com", "password": "hunter2", "name": "Fabio"}
    )
    assert registered.status_code == 201
    assert registered.json()["email"] == "fabio@example.com"

    assert anonymous_client.post(
        "/auth/register", json={"email": "fabio@example.com", "password": "x"}
    ).status_code == 409

    bad_login = anonymous_client.post("/auth/login", data={"username": "fabio@example.com", "password": "nope"})
    assert bad_login.status_code == 401

    login = anonymous_client.post("/auth/login", data={"username": "fabio@example.com", "password": "hunter2"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = anonymous_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == registered.json()["id"]
    assert me.json()["plan"] == "FREE"


def test_protected_routes_need_a_valid_token(anonymous_client):
    assert anonymous_client.get("/investments").status_code == 401
    response = anonymous_client.get("/investments", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
