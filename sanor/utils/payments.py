"""Razorpay integration: provider order creation and callback signature checks."""
from decimal import Decimal, ROUND_HALF_UP
import hashlib
import hmac
import logging

from sanor.config import get_settings

logger = logging.getLogger(__name__)

_client = None


class PaymentGatewayNotConfigured(Exception):
    pass


def get_razorpay_client():
    """Return a shared Razorpay client, or None when credentials are missing."""
    global _client
    settings = get_settings()
    if not settings.RAZORPAY_KEY_ID or not settings.RAZORPAY_KEY_SECRET:
        return None
    if _client is None:
        import razorpay
        _client = razorpay.Client(auth=(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET))
    return _client


def to_minor_units(amount: Decimal) -> int:
    # Razorpay amounts are integers in paise
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def create_provider_order(amount: Decimal, receipt: str) -> dict:
    """Create a provider transaction for ``amount`` and return the provider's order dict.

    Raises PaymentGatewayNotConfigured when no credentials are set; any SDK or
    network error propagates unchanged. Single attempt, no retries.
    """
    client = get_razorpay_client()
    if client is None:
        raise PaymentGatewayNotConfigured(
            "Payment gateway not configured. Please add RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET to .env"
        )
    settings = get_settings()
    return client.order.create(data={
        "amount": to_minor_units(amount),
        "currency": settings.PAYMENT_CURRENCY,
        "receipt": receipt,
    })


def expected_signature(provider_order_id: str, payment_id: str, secret: str) -> str:
    message = f"{provider_order_id}|{payment_id}"
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_payment_signature(provider_order_id: str, payment_id: str, signature: str) -> bool:
    secret = get_settings().RAZORPAY_KEY_SECRET or ""
    expected = expected_signature(provider_order_id, payment_id, secret)
    return hmac.compare_digest(expected.encode("utf-8"), (signature or "").encode("utf-8"))
