"""bcrypt password hashing for stored credentials."""

import bcrypt

from unicredits_auth.exceptions import WeakPasswordError

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Hash and check passwords kept in ``user_credentials``.

    Registration hashes the password before the email is verified, so the
    pending record never holds plaintext.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("secure_password_123")
    >>> service.verify("secure_password_123", stored)
    True
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor; tests pass 4.
        """
        self._rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is empty, shorter than MIN_LENGTH or longer
            than MAX_LENGTH characters
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash; a corrupt hash never matches."""
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if len(password) > self.MAX_LENGTH:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_LENGTH} characters",
            )
