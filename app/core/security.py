# File: app/core/security.py

"""
Security helpers for the inventory API.

- PasswordHasher: bcrypt hashing with a configurable cost factor.
- TokenIssuer: HS256 bearer tokens via python-jose.

Both are plain objects built from settings and handed to AuthService,
so tests can construct them with their own secret / cost.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from jose import JWTError, jwt

from app.core.errors import InvalidTokenError


DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str, rounds: Optional[int] = None) -> str:
        """
        Return a salted bcrypt hash for ``password``.

        Input past 72 bytes is truncated, so long passwords hash instead of
        failing. Any other bcrypt error propagates; callers treat it as a
        server error.
        """
        salt = bcrypt.gensalt(rounds=rounds or self.rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def compare(self, password: str, hashed_password: str) -> bool:
        """Return True if the plain password (possibly empty) matches the hash."""
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                _password_bytes(password),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            # Malformed stored hash
            return False


class TokenIssuer:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: Optional[timedelta] = None,
    ):
        if not secret_key:
            raise ValueError("TokenIssuer requires a non-empty secret key")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def sign(self, claims: dict[str, Any]) -> str:
        """
        Sign ``claims`` into a bearer token.

        No exp claim is added unless the issuer was built with an
        ``expires_delta``.
        """
        to_encode = claims.copy()
        if self.expires_delta is not None:
            to_encode["exp"] = datetime.now(timezone.utc) + self.expires_delta
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}") from exc
