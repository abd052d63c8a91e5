"""Errors raised by the checkout pipeline.

Every failure that reaches a caller is one of the classes below; views turn
them into JSON responses using ``status_code`` and ``code``.
"""


class CheckoutError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None, *, details: str | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__

    def as_dict(self) -> dict:
        body = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


# ---------- caller input ----------
class RequestValidationError(CheckoutError):
    status_code = 400


class InvalidAmount(RequestValidationError):
    default_message = "Valid amount is required"


class MissingField(RequestValidationError):
    default_message = "Missing orderData"


# ---------- trust boundary ----------
class TrustError(CheckoutError):
    status_code = 400


class InvalidSignature(TrustError):
    default_message = "Invalid payment signature."


class AmountMismatch(TrustError):
    default_message = "Amount mismatch"


class IdentityMismatch(TrustError):
    status_code = 403
    default_message = "Authenticated user does not match userId"


class Unauthenticated(TrustError):
    status_code = 401
    default_message = "Missing or invalid Authorization header"


# ---------- gateway / store ----------
class DependencyError(CheckoutError):
    status_code = 502


class GatewayUnavailable(DependencyError):
    default_message = "Error creating order"


class GatewayVerificationFailed(DependencyError):
    default_message = "Could not verify payment with gateway"


class PersistenceFailure(DependencyError):
    status_code = 500
    default_message = "Error saving order"
