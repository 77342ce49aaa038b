"""JWT token service.

Provides bearer token issuance and verification for authentication.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from taskboard_auth.exceptions import InvalidTokenError
from taskboard_auth.schemas import TokenPayload


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are stateless: validity derives from the signature and the
    embedded expiry only. Expiry is compared exactly against the service
    clock, without leeway.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(user_id)
    >>> payload = service.verify(token)
    >>> print(payload.subject_id)
    """

    DEFAULT_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ["sub", "iat", "exp", "jti"]

    def __init__(
        self,
        secret_key: str,
        token_expire_days: int = DEFAULT_EXPIRE_DAYS,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        token_expire_days
            Days until an issued token expires (default 7)
        clock
            Source of the current UTC time, used for issuance and expiry
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(days=token_expire_days)
        self._clock = clock

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def issue(self, subject_id: UUID, expires_delta: timedelta | None = None) -> str:
        """Issue a signed token for a subject.

        Parameters
        ----------
        subject_id
            The user's unique identifier
        expires_delta
            Custom validity window (optional)

        Returns
        -------
        The encoded JWT token string
        """
        issued_at = int(self._clock().timestamp())
        expire = issued_at + int((expires_delta or self._expire).total_seconds())

        payload = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": expire,
            "jti": uuid4().hex,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token signature is invalid, the token is expired, or the
            token is malformed. The public message is identical for all three.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": self.REQUIRED_CLAIMS,
                },
            )
            subject_id = UUID(payload["sub"])
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            token_id = str(payload["jti"])
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError(reason="signature mismatch") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(reason=f"malformed token: {e}") from e
        except (KeyError, ValueError, TypeError, OverflowError, OSError) as e:
            raise InvalidTokenError(reason=f"malformed token payload: {e}") from e

        result = TokenPayload(
            subject_id=subject_id,
            issued_at=issued_at,
            exp=exp,
            token_id=token_id,
        )
        if result.is_expired(self._clock()):
            raise InvalidTokenError(reason="token expired")

        return result
