import json
from dataclasses import dataclass, field

import requests
from requests import RequestException
from requests.auth import HTTPBasicAuth
from requests.utils import quote

RAZORPAY_BASE_URL = "https://api.razorpay.com/v1"
COMMON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class RazorpayError(Exception):
    """Gateway call failed. ``description`` is safe to show to a caller."""

    def __init__(self, message: str, *, status_code: int | None = None, description: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.description = description

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code == 401


@dataclass(frozen=True)
class GatewayOrder:
    id: str
    amount: int
    currency: str = "INR"
    raw: dict = field(default_factory=dict, compare=False)

    @classmethod
    def from_response(cls, data: dict) -> "GatewayOrder":
        try:
            return cls(
                id=str(data["id"]),
                amount=int(data["amount"]),
                currency=str(data.get("currency") or "INR"),
                raw=data,
            )
        except (KeyError, TypeError, ValueError):
            raise RazorpayError("Unexpected order payload from gateway", description="Malformed gateway response")


def _error_description(data: dict) -> str:
    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict):
        return str(err.get("description") or err.get("code") or "")
    return ""


class RazorpayClient:
    """Thin client for the Razorpay Orders API (basic auth with key id/secret)."""

    def __init__(self, key_id: str, key_secret: str, *, base_url: str = RAZORPAY_BASE_URL, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._auth = HTTPBasicAuth(key_id, key_secret)

    def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.request(
                method, url, json=payload, headers=COMMON_HEADERS, auth=self._auth, timeout=self.timeout
            )
        except RequestException as e:
            raise RazorpayError(f"Gateway request failed: {e}", description="Payment gateway unreachable")
        try:
            data = resp.json()
        except ValueError:
            data = {"raw": resp.text}
        if resp.status_code == 200:
            return data

        description = _error_description(data)
        if resp.status_code == 401:
            hint = "Check RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET."
        elif resp.status_code == 400:
            hint = "Bad request: amount/currency/receipt."
        elif resp.status_code in (404, 500, 502, 503):
            hint = f"Gateway error {resp.status_code}."
        else:
            hint = f"HTTP {resp.status_code}"
        raise RazorpayError(
            f"{method} {path} failed: {hint} Response: {json.dumps(data)[:800]}",
            status_code=resp.status_code,
            description=description or hint,
        )

    def create_order(self, *, amount: int, currency: str, receipt: str) -> GatewayOrder:
        data = self._request("POST", "/orders", {"amount": amount, "currency": currency, "receipt": receipt})
        return GatewayOrder.from_response(data)

    def fetch_order(self, order_id: str) -> GatewayOrder:
        data = self._request("GET", f"/orders/{quote(str(order_id), safe='')}")
        return GatewayOrder.from_response(data)
