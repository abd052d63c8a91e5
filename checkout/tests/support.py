"""Shared helpers for the checkout tests."""

import hashlib
import hmac
from unittest.mock import MagicMock

from checkout.conf import CheckoutConfig, CheckoutContext
from checkout.identity import VerifiedIdentity
from checkout.integrations.razorpay_api import GatewayOrder
from checkout.store import OrderStore

SECRET = "shh-signing-secret"


def sign(order_id: str, payment_id: str, secret: str = SECRET) -> str:
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


def make_context(*, gateway_amount=10000, reconcile=True, gateway=None, secret=SECRET):
    config = CheckoutConfig(
        key_id="rzp_test",
        key_secret="key_secret",
        signing_secret=secret,
        firebase_project_id="storefront-test",
        reconcile_amount=reconcile,
    )
    if gateway is None:
        gateway = MagicMock()
        gateway.fetch_order.side_effect = lambda oid: GatewayOrder(id=oid, amount=gateway_amount)
    return CheckoutContext(config=config, gateway=gateway, store=OrderStore(), verifier=MagicMock())


def identity(uid="uid_1"):
    return VerifiedIdentity(uid=uid, email="a@example.com")


def confirmation_body(gateway_order_id="order_1", payment_id="pay_1", secret=SECRET, **overrides):
    body = {
        "userId": "uid_1",
        "subtotal": 9000,
        "shipping": 1000,
        "total": 10000,
        "razorpay_order_id": gateway_order_id,
        "razorpay_payment_id": payment_id,
        "razorpay_signature": sign(gateway_order_id, payment_id, secret),
        "customer": {"name": "A", "phone": "9999999999", "address": "12 Main St", "city": "Erode", "pin": "638001"},
        "items": [{"name": "Honey", "quantity": 2, "price": 4500}],
    }
    body.update(overrides)
    return body
