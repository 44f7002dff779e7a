"""HS256 access tokens issued after email verification and login."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from unicredits_auth.exceptions import InvalidTokenError
from unicredits_auth.schemas import ACCESS_TOKEN_TYPE, TokenPayload

REQUIRED_CLAIMS = ["sub", "email", "exp", "iat"]


class JWTService:
    """Sign and verify bearer tokens.

    There are no refresh tokens; clients log in again once the access
    token lapses.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> token = service.create_access_token(user.id, "student@stu.pku.edu.cn")
    >>> service.verify_token(token).email
    'student@stu.pku.edu.cn'
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime_seconds(self) -> int:
        """Value reported as ``expires_in`` in token responses."""
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "email": email,
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._access_expire),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` and return its claims.

        Raises
        ------
        InvalidTokenError
            If the signature, expiry or any required claim is wrong
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                email=claims["email"],
                exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
                token_type=claims.get("type", ACCESS_TOKEN_TYPE),
            )
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
