"""
Tests for Password Hashing and Identity Tokens

Covers:
- bcrypt hashing with a salt (same password, different hashes)
- Token round trip: verify(issue(id)) == id
- Tampered, foreign, malformed and expired tokens are rejected
- Settings flag the default signing secret
"""

import base64
import json
import uuid
from datetime import timedelta

import pytest
from jose import jwt

from review_api.config import DEFAULT_SECRET_KEY, Settings
from review_api.errors import InvalidToken
from review_api.services.security import (
    TokenService,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


def _b64url(data: dict) -> str:
    raw = json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("m_pw")

        assert hashed != "m_pw"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("m_pw") != hash_password("m_pw")

    def test_verify_password(self):
        hashed = hash_password("m_pw")

        assert verify_password("m_pw", hashed) is True
        assert verify_password("M_PW", hashed) is False
        assert verify_password("", hashed) is False


class TestTokenService:
    def test_round_trip(self):
        service = TokenService(SECRET)
        user_id = uuid.uuid4()

        assert service.verify(service.issue(user_id)) == user_id

    def test_token_is_a_jwt(self):
        token = TokenService(SECRET).issue(uuid.uuid4())

        assert token.count(".") == 2

    def test_tampered_payload_rejected(self):
        service = TokenService(SECRET)
        token = service.issue(uuid.uuid4())
        header, _, signature = token.split(".")

        forged = f"{header}.{_b64url({'sub': str(uuid.uuid4())})}.{signature}"

        with pytest.raises(InvalidToken):
            service.verify(forged)

    def test_token_signed_with_other_secret_rejected(self):
        token = TokenService("another-secret").issue(uuid.uuid4())

        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed_token_rejected(self, token):
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_token_without_subject_rejected(self):
        token = jwt.encode({"id": "moe"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_token_with_non_uuid_subject_rejected(self):
        token = jwt.encode({"sub": "moe"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_expired_token_rejected(self):
        service = TokenService(SECRET, expires_delta=timedelta(seconds=-1))
        token = service.issue(uuid.uuid4())

        with pytest.raises(InvalidToken):
            service.verify(token)

    def test_unexpired_token_accepted(self):
        service = TokenService(SECRET, expires_delta=timedelta(minutes=5))
        user_id = uuid.uuid4()

        assert service.verify(service.issue(user_id)) == user_id

    def test_no_expiry_claim_by_default(self):
        token = TokenService(SECRET).issue(uuid.uuid4())

        claims = jwt.get_unverified_claims(token)
        assert "exp" not in claims
        assert "iat" in claims


class TestSecretKeySettings:
    def test_default_secret_is_flagged(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.secret_key == DEFAULT_SECRET_KEY
        assert settings.uses_default_secret_key is True

    def test_operator_secret_is_not_flagged(self):
        settings = Settings(_env_file=None, secret_key="operator-supplied")

        assert settings.uses_default_secret_key is False

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, secret_key="")

    def test_bcrypt_rounds_bounds(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, bcrypt_rounds=3)
