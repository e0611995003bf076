"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from careconnect.core.config import Settings

# Bcrypt cost (rounds) used when none is configured.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class BcryptHasher:
    """One-way salted password hashing with bcrypt."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


class TokenIssuer:
    """Signs and decodes session tokens (JWT with sub, userId, role, iat, exp)."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, account_id: str, role: str) -> str:
        """Create a JWT access token for the account; expires expire_minutes after issuance."""
        now = datetime.now(UTC).replace(microsecond=0)
        expire = now + timedelta(minutes=self.expire_minutes)
        payload: dict[str, Any] = {
            "sub": str(account_id),
            "userId": str(account_id),
            "role": role,
            "exp": expire,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate JWT; return payload (sub, userId, role, exp, iat).
        Raises jwt.PyJWTError on invalid or expired token.

        No route here requires a token; this is for services that consume it.
        Tests use it to check issued claims.
        """
        return jwt.decode(token, self._secret, algorithms=[self.algorithm])
