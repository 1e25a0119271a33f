"""Mini README: Tests for the FastAPI interface.

Drives the JSON routes with ``TestClient`` to confirm validation errors map
to 400 responses, confirmations gate destructive actions, and the pages
render net income with two fraction digits.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from markupsafe import escape

from tabledger import TrackerSession
from tabledger.interface import create_application


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application(TrackerSession()))


def test_create_and_list_tabs(client: TestClient) -> None:
    response = client.post("/api/tabs", data={"name": "Groceries"})
    assert response.status_code == 200
    assert response.json() == {"tabs": ["Groceries"]}
    assert client.get("/api/tabs").json() == {"tabs": ["Groceries"]}


def test_blank_tab_name_returns_400(client: TestClient) -> None:
    response = client.post("/api/tabs", data={"name": "  "})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a valid tab name."
    assert client.get("/api/tabs").json() == {"tabs": []}


def test_transactions_update_net_income(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})

    response = client.post("/api/tabs/Home/transactions", data={"amount": "100", "kind": "income"})
    assert response.status_code == 201
    assert response.json()["transaction"]["amount"] == "100.00"

    response = client.post("/api/tabs/Home/transactions", data={"amount": "30", "kind": "expense"})
    assert response.json()["net_income"] == "70.00"

    snapshot = client.get("/api/tabs/Home/ledger").json()
    assert snapshot["net_income"] == "70.00"
    assert len(snapshot["transactions"]) == 2


def test_invalid_amount_returns_400(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})
    response = client.post("/api/tabs/Home/transactions", data={"amount": "abc", "kind": "income"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a valid amount."
    assert client.get("/api/tabs/Home/ledger").json()["transactions"] == []


def test_unknown_tab_returns_404(client: TestClient) -> None:
    assert client.get("/api/tabs/Nowhere/ledger").status_code == 404
    assert client.get("/tabs/Nowhere").status_code == 404


def test_reset_respects_confirmation(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})
    client.post("/api/tabs/Home/transactions", data={"amount": "15", "kind": "income"})

    cancelled = client.post("/api/tabs/Home/reset", data={"confirm": "false"}).json()
    assert cancelled["decision"] == "cancel"
    assert cancelled["net_income"] == "15.00"

    confirmed = client.post("/api/tabs/Home/reset", data={"confirm": "true"}).json()
    assert confirmed["decision"] == "proceed"
    assert confirmed["net_income"] == "0.00"
    assert confirmed["transactions"] == []


def test_delete_tab_respects_confirmation(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})

    cancelled = client.post("/api/tabs/delete", data={"name": "Home", "confirm": "false"}).json()
    assert cancelled == {"decision": "cancel", "tabs": ["Home"]}

    confirmed = client.post("/api/tabs/delete", data={"name": "Home", "confirm": "true"}).json()
    assert confirmed == {"decision": "proceed", "tabs": []}


def test_pages_render_tabs_and_ledger(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})
    client.post("/api/tabs/Home/transactions", data={"amount": "12.5", "kind": "expense"})

    tab_page = client.get("/")
    assert tab_page.status_code == 200
    assert "Home" in tab_page.text

    ledger_page = client.get("/tabs/Home")
    assert ledger_page.status_code == 200
    assert "Net Income: $-12.50" in ledger_page.text
    assert "EXPENSE: $12.50" in ledger_page.text


def test_tab_name_with_slash_is_reachable(client: TestClient) -> None:
    """Tab names may contain path separators."""

    assert client.post("/api/tabs", data={"name": "Food/Drinks"}).status_code == 200
    assert client.get("/").status_code == 200

    response = client.post(
        "/api/tabs/Food%2FDrinks/transactions", data={"amount": "8", "kind": "expense"}
    )
    assert response.status_code == 201
    assert client.get("/api/tabs/Food/Drinks/ledger").json()["net_income"] == "-8.00"
    assert client.post("/api/tabs/Food/Drinks/reset", data={"confirm": "true"}).status_code == 200
    assert client.get("/tabs/Food/Drinks").status_code == 200


def test_huge_exponent_amount_returns_400(client: TestClient) -> None:
    client.post("/api/tabs", data={"name": "Home"})
    response = client.post(
        "/api/tabs/Home/transactions", data={"amount": "1e1000000", "kind": "income"}
    )
    assert response.status_code == 400
    snapshot = client.get("/api/tabs/Home/ledger")
    assert snapshot.status_code == 200
    assert snapshot.json()["transactions"] == []


def test_pages_render_session_confirmation_prompts(client: TestClient) -> None:
    session = client.app.state.session
    client.post("/api/tabs", data={"name": "Home"})

    tab_page = client.get("/").text
    assert str(escape(session.delete_request("Home").prompt)) in tab_page

    ledger_page = client.get("/tabs/Home").text
    assert str(escape(session.reset_request().prompt)) in ledger_page
