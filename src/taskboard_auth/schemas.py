"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    subject_id
        Identifier of the user the token was issued for
    issued_at
        Token issuance timestamp
    exp
        Token expiration timestamp
    token_id
        Unique id of this token (``jti`` claim)
    """

    subject_id: UUID
    issued_at: datetime
    exp: datetime
    token_id: str

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired."""
        now = now or datetime.now(tz=self.exp.tzinfo)
        return now > self.exp
