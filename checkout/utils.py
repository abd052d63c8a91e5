"""Utility helpers for the checkout app."""

import hashlib
import hmac
import secrets
import string
import time
from datetime import datetime, timezone

ALNUM = string.ascii_uppercase + string.digits


def is_non_empty_string(value) -> bool:
    return isinstance(value, str) and value.strip() != ""


def expected_signature(secret: str, order_id: str, payment_id: str) -> str:
    """Return the hex HMAC-SHA256 Razorpay computes over ``order_id|payment_id``."""

    msg = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), msg, hashlib.sha256).hexdigest()


def verify_payment_signature(secret: str, *, order_id, payment_id, signature) -> bool:
    """
    Recompute the checkout signature and compare it with the one the client
    sent back. A missing id or signature counts as a failed check.
    """

    if not (order_id and payment_id and signature):
        return False
    expected = expected_signature(secret or "", str(order_id), str(payment_id))
    return hmac.compare_digest(expected, str(signature).strip())


def generate_document_id(prefix="ORD"):
    ts = datetime.now(timezone.utc).strftime("%m%d%H%M%S")  # 10 chars
    rand = "".join(secrets.choice(ALNUM) for _ in range(7))
    return f"{prefix}{ts}{rand}"[-20:]


def receipt_label() -> str:
    return f"receipt_{int(time.time() * 1000)}"


def compose_address(address="", city="", state="", pin="") -> str:
    address = address or ""
    if city:
        address += ", " + city
    if state:
        address += ", " + state
    if pin:
        address += " - " + pin
    return address.strip()
