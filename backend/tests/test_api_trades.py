# file: tests/test_api_trades.py
import uuid

import pytest

TRADES_URL = "/api/v1/trades"

NEW_TRADE = {
    "crypto_pair": "BTC/USDT",
    "entry_price": 50000,
    "stop_loss": 49000,
    "position_size": 1000,
    "account_size": 10000,
}


@pytest.fixture
def user_headers():
    """Fresh user per test so the shared in-memory database stays isolated."""
    return {"X-User-Id": f"user-{uuid.uuid4().hex[:8]}"}


def test_create_trade_stores_derived_risk(test_app_client, user_headers):
    response = test_app_client.post(TRADES_URL, json=NEW_TRADE, headers=user_headers)

    assert response.status_code == 201, f"Unexpected status. Body: {response.text}"
    data = response.json()
    assert data["id"]
    assert data["created_at"]
    assert data["user_id"] == user_headers["X-User-Id"]
    assert data["risk_percent"] == pytest.approx(0.2)
    assert "position_size" not in data


def test_list_is_newest_first(test_app_client, user_headers):
    for pair in ("BTC/USDT", "ETH/USDT", "SOL/USDT"):
        test_app_client.post(TRADES_URL, json=dict(NEW_TRADE, crypto_pair=pair), headers=user_headers)

    response = test_app_client.get(TRADES_URL, headers=user_headers)

    assert response.status_code == 200
    assert [t["crypto_pair"] for t in response.json()] == ["SOL/USDT", "ETH/USDT", "BTC/USDT"]


def test_list_only_returns_own_trades(test_app_client, user_headers):
    test_app_client.post(TRADES_URL, json=NEW_TRADE, headers={"X-User-Id": "someone-else"})

    response = test_app_client.get(TRADES_URL, headers=user_headers)

    assert response.json() == []


def test_delete_removes_exactly_one(test_app_client, user_headers):
    first = test_app_client.post(TRADES_URL, json=NEW_TRADE, headers=user_headers).json()
    second = test_app_client.post(TRADES_URL, json=NEW_TRADE, headers=user_headers).json()

    response = test_app_client.delete(f"{TRADES_URL}/{first['id']}", headers=user_headers)

    assert response.status_code == 204
    remaining = test_app_client.get(TRADES_URL, headers=user_headers).json()
    assert [t["id"] for t in remaining] == [second["id"]]


def test_delete_unknown_trade_is_404(test_app_client, user_headers):
    response = test_app_client.delete(f"{TRADES_URL}/{uuid.uuid4()}", headers=user_headers)

    assert response.status_code == 404


def test_cannot_delete_another_users_trade(test_app_client, user_headers):
    trade = test_app_client.post(TRADES_URL, json=NEW_TRADE, headers={"X-User-Id": "owner"}).json()

    response = test_app_client.delete(f"{TRADES_URL}/{trade['id']}", headers=user_headers)

    assert response.status_code == 404


@pytest.mark.parametrize(
    "field, value",
    [("crypto_pair", ""), ("crypto_pair", "X" * 21), ("entry_price", 0), ("position_size", -1)],
)
def test_invalid_trade_is_rejected(test_app_client, user_headers, field, value):
    response = test_app_client.post(TRADES_URL, json=dict(NEW_TRADE, **{field: value}), headers=user_headers)

    assert response.status_code == 422
