# Sanor Test Suite - Shared Configuration and Fixtures
#
# This module provides:
# - An in-memory SQLite database, rebuilt for every test
# - A FastAPI TestClient bound to the application
# - A fake Razorpay client so checkout never touches the network
# - Helpers for registering users, promoting admins and signing payments

import os

# Must be set before any sanor module reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["RAZORPAY_KEY_ID"] = "rzp_test_key"
os.environ["RAZORPAY_KEY_SECRET"] = "rzp_test_secret"

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from sanor.main import app
from sanor.models.user import Base, SessionLocal, User, engine
from sanor.utils import payments
from sanor.utils.security import hash_password

RAZORPAY_TEST_SECRET = "rzp_test_secret"


# =============================================================================
# FAKE PAYMENT PROVIDER
# =============================================================================

class FakeRazorpayOrders:
    """Stands in for ``razorpay.Client().order``."""

    def __init__(self):
        self.calls: List[dict] = []
        self.fail_with: Optional[Exception] = None

    def create(self, data: dict) -> dict:
        if self.fail_with is not None:
            raise self.fail_with
        self.calls.append(data)
        return {
            "id": f"order_rzp_{len(self.calls)}",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "status": "created",
        }


class FakeRazorpayClient:
    def __init__(self):
        self.order = FakeRazorpayOrders()


# =============================================================================
# CORE FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def razorpay_client(monkeypatch) -> FakeRazorpayClient:
    fake = FakeRazorpayClient()
    monkeypatch.setattr(payments, "get_razorpay_client", lambda: fake)
    return fake


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# AUTH HELPERS
# =============================================================================

def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, email: str, password: str = "secret123", name: Optional[str] = None) -> dict:
    response = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 200, response.text
    return response.json()


def create_admin(email: str = "admin@sanor.com", password: str = "admin123") -> None:
    session = SessionLocal()
    try:
        session.add(User(email=email, name="Admin", password_hash=hash_password(password), role="admin"))
        session.commit()
    finally:
        session.close()


def login(client: TestClient, email: str, password: str) -> str:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def sign(provider_order_id: str, payment_id: str, secret: str = RAZORPAY_TEST_SECRET) -> str:
    return payments.expected_signature(provider_order_id, payment_id, secret)


@pytest.fixture
def user_headers(client) -> Dict[str, str]:
    return bearer(register(client, "shopper@sanor.com", name="Shopper")["token"])


@pytest.fixture
def other_user_headers(client) -> Dict[str, str]:
    return bearer(register(client, "second@sanor.com", name="Second")["token"])


@pytest.fixture
def admin_headers(client) -> Dict[str, str]:
    create_admin()
    return bearer(login(client, "admin@sanor.com", "admin123"))


# =============================================================================
# CATALOGUE FACTORY
# =============================================================================

class CatalogFactory:
    """Creates catalogue rows through the admin API."""

    def __init__(self, client: TestClient, headers: Dict[str, str]):
        self.client = client
        self.headers = headers
        self._counter = 0

    def product(self, price: str = "499.00", **fields) -> dict:
        self._counter += 1
        body = {
            "name": fields.pop("name", f"Test Kurti {self._counter}"),
            "price": price,
            "sizes": "S,M,L",
            "colors": "Pink,White",
        }
        body.update(fields)
        response = self.client.post("/api/products", json=body, headers=self.headers)
        assert response.status_code == 200, response.text
        return response.json()

    def set_price(self, product_id: int, price: str) -> dict:
        response = self.client.put(f"/api/products/{product_id}", json={"price": price}, headers=self.headers)
        assert response.status_code == 200, response.text
        return response.json()


@pytest.fixture
def catalog(client, admin_headers) -> CatalogFactory:
    return CatalogFactory(client, admin_headers)


# =============================================================================
# TEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "auth: Authentication and session tests")
    config.addinivalue_line("markers", "products: Catalogue tests")
    config.addinivalue_line("markers", "cart: Cart aggregate tests")
    config.addinivalue_line("markers", "orders: Order lifecycle tests")
    config.addinivalue_line("markers", "payments: Payment provider and signature tests")
    config.addinivalue_line("markers", "admin: Admin report and authorization tests")
