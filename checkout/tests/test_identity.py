import time
from types import SimpleNamespace
from unittest.mock import patch

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa
from django.test import RequestFactory, SimpleTestCase

from checkout.exceptions import Unauthenticated
from checkout.identity import FirebaseTokenVerifier, bearer_token

PROJECT = "storefront-test"
PRIVATE_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)


def make_token(key=PRIVATE_KEY, **overrides):
    now = int(time.time())
    claims = {
        "iss": f"https://securetoken.google.com/{PROJECT}",
        "aud": PROJECT,
        "sub": "uid_1",
        "email": "a@example.com",
        "iat": now,
        "exp": now + 3600,
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, key, algorithm="RS256", headers={"kid": "k1"})


class FirebaseTokenVerifierTests(SimpleTestCase):
    def setUp(self):
        self.verifier = FirebaseTokenVerifier(PROJECT)
        patcher = patch.object(
            self.verifier._jwks,
            "get_signing_key_from_jwt",
            return_value=SimpleNamespace(key=PRIVATE_KEY.public_key()),
        )
        self.get_key = patcher.start()
        self.addCleanup(patcher.stop)

    def test_valid_token_yields_subject(self):
        identity = self.verifier.verify(make_token())
        self.assertEqual(identity.uid, "uid_1")
        self.assertEqual(identity.email, "a@example.com")

    def test_rejected_tokens(self):
        other_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        cases = {
            "expired": make_token(exp=int(time.time()) - 60, iat=int(time.time()) - 3600),
            "wrong audience": make_token(aud="other-project"),
            "wrong issuer": make_token(iss="https://securetoken.google.com/other-project"),
            "no subject": make_token(sub=None),
            "foreign key": make_token(key=other_key),
            "garbage": "not-a-jwt",
        }
        for label, token in cases.items():
            with self.subTest(label):
                with self.assertLogs("checkout.identity", level="WARNING"):
                    with self.assertRaises(Unauthenticated):
                        self.verifier.verify(token)

    def test_key_lookup_failure_is_unauthenticated(self):
        self.get_key.side_effect = jwt.PyJWKClientError("Unable to find a signing key")
        with self.assertLogs("checkout.identity", level="WARNING"):
            with self.assertRaises(Unauthenticated):
                self.verifier.verify(make_token())


class BearerTokenTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_extracts_token(self):
        request = self.factory.post("/save-order", HTTP_AUTHORIZATION="Bearer abc.def.ghi ")
        self.assertEqual(bearer_token(request), "abc.def.ghi")

    def test_missing_or_malformed_header(self):
        for header in [None, "", "Basic dXNlcjpwYXNz", "Bearer ", "bearer abc"]:
            with self.subTest(header=header):
                extra = {} if header is None else {"HTTP_AUTHORIZATION": header}
                request = self.factory.post("/save-order", **extra)
                with self.assertRaises(Unauthenticated):
                    bearer_token(request)
