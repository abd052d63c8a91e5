import base64
import binascii
import json
import logging
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .identity import FirebaseTokenVerifier
from .integrations.razorpay_api import RAZORPAY_BASE_URL, RazorpayClient
from .store import OrderStore

logger = logging.getLogger(__name__)


def project_id_from_service_account(encoded: str) -> str:
    """Read ``project_id`` out of a base64-encoded service-account JSON."""

    try:
        info = json.loads(base64.b64decode(encoded, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.error(
            "Failed to decode or parse Firebase service account (starts with %r)", (encoded or "")[:10]
        )
        raise ImproperlyConfigured("FIREBASE['SERVICE_ACCOUNT_BASE64'] is not valid base64 JSON") from e
    project_id = info.get("project_id") if isinstance(info, dict) else None
    if not project_id:
        raise ImproperlyConfigured("Firebase service account has no project_id")
    return project_id


@dataclass(frozen=True)
class CheckoutConfig:
    key_id: str
    key_secret: str
    signing_secret: str
    firebase_project_id: str
    base_url: str = RAZORPAY_BASE_URL
    currency: str = "INR"
    timeout: float = 30
    reconcile_amount: bool = True

    @classmethod
    def from_settings(cls) -> "CheckoutConfig":
        """
        Build the config from ``settings.RAZORPAY`` and ``settings.FIREBASE``.
        Raises :class:`ImproperlyConfigured` listing whatever is missing.
        """

        rzp = getattr(settings, "RAZORPAY", None) or {}
        fb = getattr(settings, "FIREBASE", None) or {}

        missing = [f"RAZORPAY['{k}']" for k in ("KEY_ID", "KEY_SECRET") if not rzp.get(k)]
        project_id = fb.get("PROJECT_ID") or ""
        if not project_id and fb.get("SERVICE_ACCOUNT_BASE64"):
            project_id = project_id_from_service_account(fb["SERVICE_ACCOUNT_BASE64"])
        if not project_id:
            missing.append("FIREBASE['PROJECT_ID'] or FIREBASE['SERVICE_ACCOUNT_BASE64']")
        if missing:
            logger.error("Checkout configuration incomplete: %s", ", ".join(missing))
            raise ImproperlyConfigured(f"Missing required settings: {', '.join(missing)}")

        return cls(
            key_id=rzp["KEY_ID"],
            key_secret=rzp["KEY_SECRET"],
            signing_secret=rzp.get("SIGNING_SECRET") or rzp["KEY_SECRET"],
            firebase_project_id=project_id,
            base_url=rzp.get("BASE_URL") or RAZORPAY_BASE_URL,
            currency=rzp.get("CURRENCY") or "INR",
            timeout=float(rzp.get("TIMEOUT") or 30),
            reconcile_amount=bool(rzp.get("RECONCILE_AMOUNT", True)),
        )


@dataclass(frozen=True)
class CheckoutContext:
    """Everything a request handler needs, built once at startup."""

    config: CheckoutConfig
    gateway: RazorpayClient
    store: OrderStore
    verifier: FirebaseTokenVerifier

    @classmethod
    def build(cls, config: CheckoutConfig) -> "CheckoutContext":
        return cls(
            config=config,
            gateway=RazorpayClient(
                config.key_id, config.key_secret, base_url=config.base_url, timeout=config.timeout
            ),
            store=OrderStore(),
            verifier=FirebaseTokenVerifier(config.firebase_project_id),
        )
