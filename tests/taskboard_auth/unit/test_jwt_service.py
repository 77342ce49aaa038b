"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from taskboard_auth.exceptions import InvalidTokenError
from taskboard_auth.services import JWTService

SECRET = "test-secret-key-12345"
ISSUED_AT = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    """Settable clock for expiry tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service.expires_in_seconds == 7 * 24 * 3600

    def test_init_with_empty_secret_raises(self):
        """An unkeyed token service must not exist."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key="test-secret", token_expire_days=1)
        assert service.expires_in_seconds == 24 * 3600


class TestIssueAndVerify:
    """Tests for token issuance and verification."""

    def setup_method(self):
        self.clock = FixedClock(ISSUED_AT)
        self.service = JWTService(secret_key=SECRET, clock=self.clock)
        self.user_id = uuid4()

    def test_verify_returns_subject(self):
        token = self.service.issue(self.user_id)

        payload = self.service.verify(token)

        assert payload.subject_id == self.user_id
        assert payload.issued_at == ISSUED_AT
        assert payload.exp == ISSUED_AT + timedelta(days=7)
        assert payload.token_id

    def test_tokens_are_unique(self):
        """Two tokens for the same subject in the same second still differ."""
        first = self.service.issue(self.user_id)
        second = self.service.issue(self.user_id)

        assert first != second
        assert self.service.verify(first).subject_id == self.user_id
        assert self.service.verify(second).subject_id == self.user_id

    def test_token_is_standard_hs256(self):
        token = self.service.issue(self.user_id)

        header = jwt.get_unverified_header(token)
        claims = jwt.decode(
            token,
            SECRET,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iat": False},
        )

        assert header["alg"] == "HS256"
        assert claims["sub"] == str(self.user_id)
        assert claims["exp"] - claims["iat"] == 7 * 24 * 3600

    def test_valid_until_expiry_boundary(self):
        token = self.service.issue(self.user_id)

        self.clock.now = ISSUED_AT + timedelta(days=7)

        assert self.service.verify(token).subject_id == self.user_id

    def test_expired_one_second_after_boundary(self):
        token = self.service.issue(self.user_id)

        self.clock.now = ISSUED_AT + timedelta(days=7, seconds=1)

        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.verify(token)
        assert exc_info.value.reason == "token expired"

    def test_custom_expires_delta(self):
        token = self.service.issue(self.user_id, expires_delta=timedelta(minutes=5))

        self.clock.now = ISSUED_AT + timedelta(minutes=5, seconds=1)

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)


class TestVerificationFailures:
    """All failure kinds surface as the same InvalidTokenError."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()

    def test_malformed_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify("invalid.token.string")

    def test_empty_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify("")

    def test_tampered_token_raises(self):
        token = self.service.issue(self.user_id)
        tampered = token[:-5] + ("xxxxx" if not token.endswith("xxxxx") else "yyyyy")

        with pytest.raises(InvalidTokenError):
            self.service.verify(tampered)

    def test_wrong_secret_raises(self):
        other_service = JWTService(secret_key="different-secret")
        token = other_service.issue(self.user_id)

        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.verify(token)
        assert exc_info.value.reason == "signature mismatch"

    def test_unsigned_token_raises(self):
        token = jwt.encode(
            {"sub": str(self.user_id), "iat": 0, "exp": 2**31, "jti": "x"},
            None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_missing_claim_raises(self):
        token = jwt.encode({"sub": str(self.user_id)}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_non_uuid_subject_raises(self):
        now = int(datetime.now(tz=timezone.utc).timestamp())
        token = jwt.encode(
            {"sub": "not-a-uuid", "iat": now, "exp": now + 60, "jti": "x"},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_failures_share_public_message(self):
        expired = self.service.issue(self.user_id, expires_delta=timedelta(seconds=-1))
        foreign = JWTService(secret_key="other").issue(self.user_id)

        messages = set()
        for token in (expired, foreign, "garbage"):
            with pytest.raises(InvalidTokenError) as exc_info:
                self.service.verify(token)
            messages.add(str(exc_info.value))

        assert messages == {"Invalid or expired token"}
