"""Caller identity for order confirmation.

Clients sign in with Firebase and send the resulting ID token as
``Authorization: Bearer <token>``. The token is an RS256 JWT signed by
Google; we check it against Google's published keys and the project's
audience/issuer, and the ``sub`` claim becomes the trusted user id.
"""

import logging
from dataclasses import dataclass

import jwt

from .exceptions import Unauthenticated

logger = logging.getLogger(__name__)

GOOGLE_JWKS_URL = "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"


@dataclass(frozen=True)
class VerifiedIdentity:
    uid: str
    email: str | None = None


def bearer_token(request) -> str:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        raise Unauthenticated()
    token = auth.split("Bearer ", 1)[1].strip()
    if not token:
        raise Unauthenticated()
    return token


class FirebaseTokenVerifier:
    def __init__(self, project_id: str, *, jwks_url: str = GOOGLE_JWKS_URL):
        self.project_id = project_id
        self.issuer = f"https://securetoken.google.com/{project_id}"
        self._jwks = jwt.PyJWKClient(jwks_url)

    def verify(self, token: str) -> VerifiedIdentity:
        try:
            signing_key = self._jwks.get_signing_key_from_jwt(token)
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self.project_id,
                issuer=self.issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.PyJWTError as e:
            logger.warning("Token verification failed: %s", e)
            raise Unauthenticated("Unauthorized: Invalid token") from e

        uid = claims.get("sub")
        if not uid:
            raise Unauthenticated("Unauthorized: Invalid token")
        return VerifiedIdentity(uid=uid, email=claims.get("email"))
