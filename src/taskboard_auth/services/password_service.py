"""Password hashing service using bcrypt.

Provides salted password hashing, constant-time verification and
strength validation.
"""

import bcrypt

from taskboard_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    ``bcrypt.checkpw`` compares digests in constant time.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_MIN_LENGTH = 6
    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12, min_length: int = DEFAULT_MIN_LENGTH):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
        min_length
            Minimum number of characters accepted by ``validate_strength``
        """
        self._rounds = rounds
        self._min_length = min_length
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Raises
        ------
        WeakPasswordError
            If password is empty, too short, or longer than bcrypt accepts
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self._min_length:
            msg = f"Password must be at least {self._min_length} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def verify_against_dummy(self, password: str) -> bool:
        """Run a full verification against a throwaway hash; always False.

        Used when no stored hash exists so that the caller spends the same
        time as for a real mismatch.
        """
        if self._dummy_hash is None:
            salt = bcrypt.gensalt(rounds=self._rounds)
            self._dummy_hash = bcrypt.hashpw(b"taskboard-dummy-password", salt).decode()
        self.verify(password, self._dummy_hash)
        return False
