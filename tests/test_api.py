"""Tests for API endpoints"""
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from api.index import app
from storefront.routers.deps import get_session_registry, reset_session_registry


@pytest.fixture(autouse=True)
def fresh_sessions():
    """Every test starts without live sessions"""
    reset_session_registry()
    yield
    reset_session_registry()


@pytest.fixture
def client():
    """Test client"""
    return TestClient(app)


@pytest.fixture
def headers():
    return {"X-Session-Id": "session-123"}


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestPublicEndpoints:

    def test_get_products(self, client):
        response = client.get("/api/webapp/products")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert data["products"][0]["price_display"] == "₽8,990"
        assert data["categories"] == ["Аудио", "Телефоны", "Компьютеры"]

    def test_filter_by_category(self, client):
        response = client.get("/api/webapp/products", params={"category": "Телефоны"})

        assert [p["id"] for p in response.json()["products"]] == [2]

    def test_get_product_by_id(self, client):
        response = client.get("/api/webapp/products/3")

        assert response.status_code == 200
        assert response.json()["name"] == "Ноутбук MacBook"

    def test_get_product_not_found(self, client):
        response = client.get("/api/webapp/products/404")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_payment_methods(self, client):
        response = client.get("/api/webapp/payment-methods")

        ids = [m["id"] for m in response.json()["payment_methods"]]
        assert ids == ["card", "apple_pay", "paypal"]


class TestCartEndpoints:

    def test_session_header_required(self, client):
        response = client.get("/api/webapp/cart")

        assert response.status_code == 400

    def test_empty_cart(self, client, headers):
        response = client.get("/api/webapp/cart", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["is_empty"] is True
        assert data["summary"]["total"] == 0
        assert data["summary"]["item_count"] == 0

    def test_add_twice_merges(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)
        response = client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)

        data = response.json()
        assert len(data["items"]) == 1
        assert data["items"][0]["quantity"] == 2
        assert data["summary"]["subtotal"] == 17980
        assert data["summary"]["subtotal_display"] == "₽17,980"

    def test_add_unknown_product(self, client, headers):
        response = client.post("/api/webapp/cart/add", json={"product_id": 77}, headers=headers)

        assert response.status_code == 404

    def test_update_quantity_and_remove(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)
        client.post("/api/webapp/cart/add", json={"product_id": 2}, headers=headers)

        response = client.patch("/api/webapp/cart/item", json={"product_id": 2, "quantity": 3}, headers=headers)
        assert response.json()["summary"]["item_count"] == 4

        response = client.patch("/api/webapp/cart/item", json={"product_id": 2, "quantity": 0}, headers=headers)
        assert [i["product_id"] for i in response.json()["items"]] == [1]

        response = client.delete("/api/webapp/cart/item", params={"product_id": 1}, headers=headers)
        assert response.json()["is_empty"] is True

    def test_promo_flow(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)
        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)

        response = client.post("/api/webapp/cart/promo/apply", json={"code": "save10"}, headers=headers)
        data = response.json()
        assert response.status_code == 200
        assert data["promo"]["code"] == "SAVE10"
        assert "promo_code" not in data
        assert data["summary"]["discount"] == 1798
        assert data["summary"]["total"] == 16182

        response = client.post("/api/webapp/cart/promo/apply", json={"code": "BADCODE"}, headers=headers)
        data = response.json()
        assert response.status_code == 200
        assert data["promo"] is None
        assert data["summary"]["discount"] == 0

    def test_fixed_promo_on_empty_cart_goes_negative(self, client, headers):
        response = client.post("/api/webapp/cart/promo/apply", json={"code": "WELCOME"}, headers=headers)

        summary = response.json()["summary"]
        assert summary["total"] == -1000
        assert summary["total_display"] == "-₽1,000"

    def test_clear_keeps_promo(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 3}, headers=headers)
        client.post("/api/webapp/cart/promo/apply", json={"code": "SALE20"}, headers=headers)

        response = client.post("/api/webapp/cart/clear", headers=headers)

        data = response.json()
        assert data["items"] == []
        assert data["promo"]["code"] == "SALE20"

    def test_sessions_do_not_share_carts(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)

        response = client.get("/api/webapp/cart", headers={"X-Session-Id": "other"})

        assert response.json()["is_empty"] is True


class TestSessionLifecycle:

    def test_distinct_session_ids_stay_bounded(self, client, monkeypatch):
        monkeypatch.setenv("MAX_SESSIONS", "25")
        reset_session_registry()

        for n in range(200):
            response = client.get("/api/webapp/cart", headers={"X-Session-Id": f"visitor-{n}"})
            assert response.status_code == 200

        assert len(get_session_registry()) == 25

    def test_expired_session_starts_over(self, client, headers, monkeypatch):
        monkeypatch.setenv("SESSION_TTL_SECONDS", "0")
        reset_session_registry()

        client.post("/api/webapp/cart/add", json={"product_id": 1}, headers=headers)
        response = client.get("/api/webapp/cart", headers=headers)

        assert response.json()["is_empty"] is True

    def test_overlong_session_id_rejected(self, client):
        response = client.get("/api/webapp/cart", headers={"X-Session-Id": "s" * 129})

        assert response.status_code == 400
        assert len(get_session_registry()) == 0


class TestCartErrorMapping:
    """Unexpected failures in cart handlers become logged 500s."""

    @pytest.mark.parametrize("method, path, kwargs", [
        ("get", "/api/webapp/cart", {}),
        ("post", "/api/webapp/cart/add", {"json": {"product_id": 1}}),
        ("patch", "/api/webapp/cart/item", {"json": {"product_id": 1, "quantity": 2}}),
        ("delete", "/api/webapp/cart/item", {"params": {"product_id": 1}}),
        ("post", "/api/webapp/cart/promo/apply", {"json": {"code": "SAVE10"}}),
        ("post", "/api/webapp/cart/clear", {}),
    ])
    def test_failure_returns_500(self, client, headers, caplog, method, path, kwargs):
        with patch("storefront.routers.webapp.cart.format_cart_response", side_effect=RuntimeError("boom")):
            response = getattr(client, method)(path, headers=headers, **kwargs)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
        assert "boom" in caplog.text


class TestCheckoutEndpoints:

    def test_default_checkout(self, client, headers):
        response = client.get("/api/webapp/checkout", headers=headers)

        data = response.json()
        assert data["payment_method"]["id"] == "card"
        assert data["can_checkout"] is False

    def test_select_payment_method(self, client, headers):
        client.post("/api/webapp/cart/add", json={"product_id": 2}, headers=headers)

        response = client.post("/api/webapp/checkout/payment-method", json={"method": "apple_pay"}, headers=headers)

        data = response.json()
        assert data["payment_method"] == {"id": "apple_pay", "label": "Apple Pay"}
        assert data["can_checkout"] is True
        assert data["summary"]["total_display"] == "₽89,990"

    def test_unknown_payment_method(self, client, headers):
        response = client.post("/api/webapp/checkout/payment-method", json={"method": "cash"}, headers=headers)

        assert response.status_code == 422
