import logging
from dataclasses import dataclass

from .exceptions import (
    AmountMismatch,
    GatewayUnavailable,
    GatewayVerificationFailed,
    IdentityMismatch,
    InvalidSignature,
)
from .forms import ConfirmationPayload, PendingOrderRequest
from .identity import VerifiedIdentity
from .integrations.razorpay_api import GatewayOrder, RazorpayError
from .models import Order
from .utils import compose_address, is_non_empty_string, receipt_label, verify_payment_signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmationResult:
    document_id: str
    order: Order


def initiate_order(context, request: PendingOrderRequest) -> GatewayOrder:
    """Create a pending Razorpay order for ``request.amount`` paise."""

    try:
        gateway_order = context.gateway.create_order(
            amount=request.amount,
            currency=context.config.currency,
            receipt=receipt_label(),
        )
    except RazorpayError as e:
        logger.error("Razorpay order creation error for user %r: %s", request.user_id, e)
        if e.is_auth_failure:
            logger.error("AUTHENTICATION FAILED: check RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET")
        raise GatewayUnavailable("Error creating order", details=e.description) from e
    logger.info("Razorpay order %s created for user %r (%s paise)", gateway_order.id, request.user_id, request.amount)
    return gateway_order


def bind_identity(identity: VerifiedIdentity, payload: ConfirmationPayload) -> str:
    """Return the user id to record; the payload may not claim someone else's."""

    if payload.user_id and payload.user_id != identity.uid:
        logger.warning(
            "userId %r does not match token subject %r for order %s",
            payload.user_id,
            identity.uid,
            payload.razorpay_order_id,
        )
        raise IdentityMismatch()
    return identity.uid


def check_signature(secret: str, payload: ConfirmationPayload) -> None:
    ok = verify_payment_signature(
        secret,
        order_id=payload.razorpay_order_id,
        payment_id=payload.razorpay_payment_id,
        signature=payload.razorpay_signature,
    )
    if not ok:
        logger.warning(
            "Invalid or missing Razorpay signature for order: %s %s",
            payload.razorpay_order_id,
            payload.razorpay_payment_id,
        )
        raise InvalidSignature()


def reconcile_amount(gateway, payload: ConfirmationPayload) -> GatewayOrder:
    try:
        gateway_order = gateway.fetch_order(payload.razorpay_order_id)
    except RazorpayError as e:
        logger.error("Fetching Razorpay order %s failed: %s", payload.razorpay_order_id, e)
        raise GatewayVerificationFailed(details=e.description) from e

    if gateway_order.amount != payload.total:
        logger.warning(
            "Amount mismatch for order %s: gateway=%s claimed=%s",
            payload.razorpay_order_id,
            gateway_order.amount,
            payload.total,
        )
        raise AmountMismatch()
    return gateway_order


def resolve_document_id(store, payload: ConfirmationPayload) -> str:
    for candidate in (payload.order_id, payload.razorpay_order_id):
        if is_non_empty_string(candidate):
            return candidate.strip()
    logger.warning("Missing order_id in payload. Falling back to generated id.")
    return store.new_document_id()


def build_record(payload: ConfirmationPayload, user_id: str) -> dict:
    customer = payload.customer
    return {
        "user_id": user_id,
        "customer_name": customer.name,
        "phone": customer.phone,
        "address": compose_address(customer.address, customer.city, customer.state, customer.pin),
        "total_amount": payload.total,
        "subtotal": payload.subtotal,
        "shipping": payload.shipping,
        "payment_id": payload.razorpay_payment_id,
        "gateway_order_id": payload.razorpay_order_id,
        "payment_status": Order.PAID,
        "items": [item.as_dict() for item in payload.items],
        "signature": payload.razorpay_signature or None,
    }


def confirm_payment(context, payload: ConfirmationPayload, identity: VerifiedIdentity) -> ConfirmationResult:
    """
    Run the confirmation checks in order (identity, signature, amount) and
    persist the order only if all of them pass.
    """

    user_id = bind_identity(identity, payload)
    check_signature(context.config.signing_secret, payload)
    if context.config.reconcile_amount:
        reconcile_amount(context.gateway, payload)

    document_id = resolve_document_id(context.store, payload)
    order = context.store.set(document_id, build_record(payload, user_id))
    logger.info("Order %s saved for payment %s", document_id, payload.razorpay_payment_id)
    return ConfirmationResult(document_id=document_id, order=order)
