import json

import pytest
from django.apps import apps
from django.test import Client

from inventory_ledger import Ledger
from inventory_ledger.apps import get_ledger

ORDER_URL = "/api/inventory/order"


@pytest.fixture
def ledger(monkeypatch):
    """Fresh seed ledger installed as the process ledger for one test."""
    fresh = Ledger({"P001": 100, "P002": 50})
    monkeypatch.setattr(apps.get_app_config("inventory_ledger"), "ledger", fresh)
    return fresh


@pytest.fixture
def client():
    return Client()


def _order(client, payload, **extra):
    body = payload if isinstance(payload, (str, bytes)) else json.dumps(payload)
    return client.post(ORDER_URL, data=body, content_type="application/json", **extra)


def test_startup_ledger_uses_configured_seed():
    assert get_ledger().products() == ["P001", "P002"]


def test_check_stock_endpoint(client, ledger):
    resp = client.get("/api/inventory/check/P001/3")

    assert resp.status_code == 200
    assert resp.json() == {"productId": "P001", "available": True}


def test_check_stock_unknown_product_is_200(client, ledger):
    resp = client.get("/api/inventory/check/P999/1")

    assert resp.status_code == 200
    assert resp.json() == {"productId": "P999", "available": False}


def test_check_stock_accepts_negative_quantity(client, ledger):
    resp = client.get("/api/inventory/check/P002/-1")

    assert resp.json() == {"productId": "P002", "available": True}


def test_check_stock_non_integer_quantity_is_not_routed(client, ledger):
    assert client.get("/api/inventory/check/P001/three").status_code == 404


def test_check_stock_rejects_post(client, ledger):
    assert client.post("/api/inventory/check/P001/3").status_code == 405


def test_order_then_check(client, ledger):
    resp = _order(client, {"productId": "P001", "quantity": 3})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Order created."}
    assert ledger.quantity_of("P001") == 97

    resp = client.get("/api/inventory/check/P001/3")
    assert resp.json()["available"] is True


def test_order_property_names_are_case_insensitive(client, ledger):
    resp = _order(client, {"ProductId": "P002", "Quantity": 5})

    assert resp.status_code == 200
    assert ledger.quantity_of("P002") == 45


def test_order_insufficient_stock(client, ledger):
    resp = _order(client, {"productId": "P001", "quantity": 1000})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Insufficient stock."}
    assert ledger.quantity_of("P001") == 100


def test_order_unknown_product(client, ledger):
    resp = _order(client, {"productId": "P999", "quantity": 1})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Insufficient stock."


@pytest.mark.parametrize(
    "payload",
    [{"productId": "", "quantity": 3}, {"quantity": 3}, {"productId": None}],
)
def test_order_without_product_id(client, ledger, payload):
    resp = _order(client, payload)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "ProductId is required."}
    assert ledger.snapshot() == {"P001": 100, "P002": 50}


@pytest.mark.parametrize(
    "body, message",
    [
        ("not json", "Request body must be a JSON object."),
        ("[1, 2]", "Request body must be a JSON object."),
        ("", "Request body must be a JSON object."),
        ('{"productId": "P001", "quantity": ' + "9" * 5000 + "}", "Request body must be a JSON object."),
        ("[" * 100_000 + "]" * 100_000, "Request body must be a JSON object."),
        (b"\x80abc", "Request body must be a JSON object."),
        ('{"productId": "P001", "quantity": "3"}', "Quantity must be an integer."),
        ('{"productId": 1, "quantity": 3}', "ProductId must be a string."),
    ],
)
def test_order_malformed_body(client, ledger, body, message):
    resp = _order(client, body)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": message}
    assert ledger.snapshot() == {"P001": 100, "P002": 50}


def test_order_lock_timeout_is_409(client, monkeypatch):
    class NeverBackend:
        def acquire(self, key, timeout):
            return False

        def release(self, key):
            raise AssertionError("release should not be called")

    busy = Ledger({"P001": 100}, lock_timeout=0.01, backend=NeverBackend())
    monkeypatch.setattr(apps.get_app_config("inventory_ledger"), "ledger", busy)

    resp = _order(client, {"productId": "P001", "quantity": 1})

    assert resp.status_code == 409
    assert resp.json() == {"success": False, "message": "Inventory busy, try again."}
    assert busy.quantity_of("P001") == 100


def test_order_rejects_get(client, ledger):
    assert client.get(ORDER_URL).status_code == 405
