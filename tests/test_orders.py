# Sanor API Tests - Checkout & Payment Verification
#
# Tests for:
# - Pending order creation from the cart (snapshot total and line items)
# - Razorpay order creation and its failure modes
# - Signature verification: rejection keeps the order pending and the cart intact,
#   acceptance marks the order paid and empties the entire cart
# - Order reads and ownership checks

from decimal import Decimal

import pytest

from sanor.models.cart import CartItem
from sanor.models.order import Order, OrderItem
from sanor.utils import payments
from tests.conftest import sign

SHIPPING = {
    "shippingName": "Asha Rao",
    "shippingEmail": "asha@sanor.com",
    "shippingPhone": "9876543210",
    "shippingAddress": "12 MG Road",
    "shippingCity": "Pune",
    "shippingState": "MH",
    "shippingPincode": "411001",
}


def add(client, headers, product_id, **fields):
    response = client.post("/api/cart", json={"productId": product_id, **fields}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


def checkout(client, headers, body=None):
    return client.post("/api/orders/create-razorpay-order", json=body if body is not None else SHIPPING, headers=headers)


def verify(client, headers, order_id, provider_order_id, payment_id="pay_123", signature=None):
    return client.post(
        "/api/orders/verify-payment",
        json={
            "orderId": order_id,
            "razorpay_order_id": provider_order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": signature if signature is not None else sign(provider_order_id, payment_id),
        },
        headers=headers,
    )


@pytest.fixture
def filled_cart(client, catalog, user_headers):
    saree = catalog.product(name="Purple Chiffon Saree", price="2499.00", imageUrl="https://img/saree.jpg")
    top = catalog.product(name="White Crop Top", price="599.00")
    add(client, user_headers, saree["id"], quantity=1, size="Free Size", color="Purple")
    add(client, user_headers, top["id"], quantity=3, size="S", color="White")
    return {"saree": saree, "top": top}


@pytest.mark.orders
class TestCheckout:

    def test_empty_cart_is_400_and_creates_nothing(self, client, user_headers, db):
        response = checkout(client, user_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty"}
        assert db.query(Order).count() == 0

    def test_vanished_product_is_400_and_creates_nothing(self, client, catalog, user_headers, db):
        product = catalog.product(name="Discontinued Dupatta")
        add(client, user_headers, product["id"])
        assert client.delete(f"/api/products/{product['id']}", headers=catalog.headers).status_code == 200

        response = checkout(client, user_headers)
        assert response.status_code == 400
        assert "no longer available" in response.json()["error"]
        assert db.query(Order).count() == 0

    def test_creates_pending_order_with_snapshot(self, client, user_headers, filled_cart, razorpay_client, db):
        response = checkout(client, user_headers)
        assert response.status_code == 200, response.text
        body = response.json()

        assert body["razorpayOrderId"] == "order_rzp_1"
        assert body["amount"] == 429600  # (2499 + 3 x 599) rupees in paise
        assert body["currency"] == "INR"
        assert body["keyId"] == "rzp_test_key"
        assert razorpay_client.order.calls == [
            {"amount": 429600, "currency": "INR", "receipt": f"order_{body['orderId']}"}
        ]

        order = db.query(Order).filter(Order.id == body["orderId"]).one()
        assert order.status == "pending"
        assert order.total_amount == Decimal("4296.00")
        assert order.razorpay_order_id == "order_rzp_1"
        assert order.shipping_city == "Pune"
        assert order.paid_at is None

        items = {i.product_name: i for i in db.query(OrderItem).filter(OrderItem.order_id == order.id)}
        assert set(items) == {"Purple Chiffon Saree", "White Crop Top"}
        assert items["Purple Chiffon Saree"].product_image == "https://img/saree.jpg"
        assert items["White Crop Top"].quantity == 3
        assert items["White Crop Top"].size == "S"
        assert items["White Crop Top"].price == Decimal("599.00")

    def test_cart_is_kept_until_payment(self, client, user_headers, filled_cart):
        assert checkout(client, user_headers).status_code == 200
        assert len(client.get("/api/cart", headers=user_headers).json()["items"]) == 2

    def test_tax_is_not_charged(self, client, user_headers, filled_cart):
        cart_total = client.get("/api/cart", headers=user_headers).json()
        body = checkout(client, user_headers).json()
        assert Decimal(body["amount"]) / 100 == Decimal(cart_total["subtotal"])

    def test_order_total_ignores_later_price_edits(self, client, user_headers, filled_cart, catalog):
        order_id = checkout(client, user_headers).json()["orderId"]
        catalog.set_price(filled_cart["saree"]["id"], "9999.00")

        order = client.get(f"/api/orders/{order_id}", headers=user_headers).json()
        assert Decimal(order["totalAmount"]) == Decimal("4296.00")
        saree_line = next(i for i in order["items"] if i["productId"] == filled_cart["saree"]["id"])
        assert Decimal(saree_line["price"]) == Decimal("2499.00")

    def test_no_stock_is_touched(self, client, user_headers, filled_cart):
        checkout(client, user_headers)
        product = client.get(f"/api/products/{filled_cart['top']['id']}").json()
        assert product["stock"] == filled_cart["top"]["stock"]

    def test_missing_gateway_credentials_leave_orphan_pending_order(self, client, user_headers, filled_cart, db, monkeypatch):
        monkeypatch.setattr(payments, "get_razorpay_client", lambda: None)
        response = checkout(client, user_headers)
        assert response.status_code == 500
        assert "Payment gateway not configured" in response.json()["error"]

        order = db.query(Order).one()
        assert order.status == "pending"
        assert order.razorpay_order_id is None
        assert db.query(OrderItem).filter(OrderItem.order_id == order.id).count() == 2

    def test_provider_error_is_500_without_rollback(self, client, user_headers, filled_cart, razorpay_client, db):
        razorpay_client.order.fail_with = RuntimeError("gateway timeout")
        response = checkout(client, user_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create payment order"}
        assert db.query(Order).filter(Order.status == "pending").count() == 1

    def test_shipping_fields_are_optional(self, client, user_headers, filled_cart):
        response = checkout(client, user_headers, body={})
        assert response.status_code == 200


@pytest.mark.orders
@pytest.mark.payments
class TestVerifyPayment:

    def test_bad_signature_keeps_pending_and_cart(self, client, user_headers, filled_cart, db):
        body = checkout(client, user_headers).json()
        response = verify(client, user_headers, body["orderId"], body["razorpayOrderId"], signature="deadbeef")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid payment signature"}

        order = db.query(Order).filter(Order.id == body["orderId"]).one()
        assert order.status == "pending"
        assert order.paid_at is None
        assert order.razorpay_payment_id is None
        assert db.query(CartItem).count() == 2

    def test_signature_over_other_payment_id_is_rejected(self, client, user_headers, filled_cart):
        body = checkout(client, user_headers).json()
        forged = sign(body["razorpayOrderId"], "pay_other")
        response = verify(client, user_headers, body["orderId"], body["razorpayOrderId"], "pay_123", signature=forged)
        assert response.status_code == 400

    def test_signature_for_another_order_is_rejected(self, client, user_headers, filled_cart, db):
        cheap = checkout(client, user_headers).json()
        other = checkout(client, user_headers).json()
        response = verify(client, user_headers, other["orderId"], cheap["razorpayOrderId"], "pay_cheap")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid payment signature"}

        order = db.query(Order).filter(Order.id == other["orderId"]).one()
        assert order.status == "pending"
        assert order.razorpay_payment_id is None
        assert db.query(CartItem).count() == 2

    def test_order_without_provider_order_cannot_be_paid(self, client, user_headers, filled_cart, db, monkeypatch):
        opened = checkout(client, user_headers).json()
        monkeypatch.setattr(payments, "get_razorpay_client", lambda: None)
        assert checkout(client, user_headers).status_code == 500
        orphan = db.query(Order).filter(Order.razorpay_order_id.is_(None)).one()

        response = verify(client, user_headers, orphan.id, opened["razorpayOrderId"])
        assert response.status_code == 400
        db.expire_all()
        assert db.query(Order).filter(Order.id == orphan.id).one().status == "pending"

    def test_valid_callback_on_cancelled_order_marks_it_paid(self, client, user_headers, admin_headers, filled_cart, db):
        body = checkout(client, user_headers).json()
        client.put(f"/api/admin/orders/{body['orderId']}/status", json={"status": "cancelled"}, headers=admin_headers)
        response = verify(client, user_headers, body["orderId"], body["razorpayOrderId"])
        assert response.status_code == 200
        db.expire_all()
        assert db.query(Order).filter(Order.id == body["orderId"]).one().status == "paid"

    def test_good_signature_marks_paid_and_clears_whole_cart(self, client, catalog, user_headers, filled_cart, db):
        body = checkout(client, user_headers).json()
        # added during the payment round-trip; cleared as well
        add(client, user_headers, catalog.product(name="Late Add")["id"])

        response = verify(client, user_headers, body["orderId"], body["razorpayOrderId"], "pay_ok")
        assert response.status_code == 200
        assert response.json() == {"message": "Payment verified successfully", "orderId": body["orderId"]}

        order = db.query(Order).filter(Order.id == body["orderId"]).one()
        assert order.status == "paid"
        assert order.paid_at is not None
        assert order.razorpay_payment_id == "pay_ok"
        assert order.razorpay_signature == sign(body["razorpayOrderId"], "pay_ok")
        assert db.query(CartItem).count() == 0

    def test_other_users_cart_survives(self, client, catalog, user_headers, other_user_headers, filled_cart, db):
        add(client, other_user_headers, filled_cart["top"]["id"])
        body = checkout(client, user_headers).json()
        verify(client, user_headers, body["orderId"], body["razorpayOrderId"])
        assert db.query(CartItem).count() == 1

    def test_unknown_order_is_404(self, client, user_headers):
        response = verify(client, user_headers, 777, "order_rzp_x")
        assert response.status_code == 404

    def test_foreign_order_is_403(self, client, user_headers, other_user_headers, filled_cart):
        body = checkout(client, user_headers).json()
        response = verify(client, other_user_headers, body["orderId"], body["razorpayOrderId"])
        assert response.status_code == 403


@pytest.mark.payments
class TestSignatures:

    def test_expected_signature_is_hex_hmac_sha256(self):
        import hashlib
        import hmac
        digest = hmac.new(b"k", b"order_1|pay_1", hashlib.sha256).hexdigest()
        assert payments.expected_signature("order_1", "pay_1", "k") == digest

    def test_verify_uses_configured_secret(self):
        assert payments.verify_payment_signature("order_1", "pay_1", sign("order_1", "pay_1"))
        assert not payments.verify_payment_signature("order_1", "pay_1", sign("order_1", "pay_1", secret="other"))
        assert not payments.verify_payment_signature("order_1", "pay_1", sign("order_1", "pay_1").upper())

    def test_minor_units_round_half_up(self):
        assert payments.to_minor_units(Decimal("4296.00")) == 429600
        assert payments.to_minor_units(Decimal("0.005")) == 1


@pytest.mark.orders
class TestOrderReads:

    def test_user_lists_own_orders_newest_first(self, client, user_headers, other_user_headers, filled_cart):
        first = checkout(client, user_headers).json()["orderId"]
        second = checkout(client, user_headers).json()["orderId"]

        mine = client.get("/api/orders", headers=user_headers).json()
        assert [o["id"] for o in mine] == [second, first]
        assert client.get("/api/orders", headers=other_user_headers).json() == []

    def test_order_detail_has_items_and_shipping(self, client, user_headers, filled_cart):
        order_id = checkout(client, user_headers).json()["orderId"]
        order = client.get(f"/api/orders/{order_id}", headers=user_headers).json()
        assert order["status"] == "pending"
        assert order["shipping"]["pincode"] == "411001"
        assert len(order["items"]) == 2

    def test_foreign_order_detail_is_403_but_admin_may_read(self, client, user_headers, other_user_headers, admin_headers, filled_cart):
        order_id = checkout(client, user_headers).json()["orderId"]
        assert client.get(f"/api/orders/{order_id}", headers=other_user_headers).status_code == 403
        assert client.get(f"/api/orders/{order_id}", headers=admin_headers).status_code == 200

    def test_missing_order_is_404(self, client, user_headers):
        assert client.get("/api/orders/12345", headers=user_headers).status_code == 404
