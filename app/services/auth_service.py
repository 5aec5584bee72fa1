# File: app/services/auth_service.py

"""
Authentication service.

Handles:
  - Signup (lookup, hash, insert)
  - Login (lookup, password check, token issue)
  - Logout (nothing to do server-side; tokens are stateless)

Stateless across requests: everything it needs is passed in at
construction, so a new instance is built per request by the API deps.
"""

import logging

from app.core.errors import (
    AppError,
    ConflictError,
    InternalError,
    InvalidCredentialError,
    InvalidTokenError,
    NotFoundError,
)
from app.core.security import DEFAULT_BCRYPT_ROUNDS, PasswordHasher, TokenIssuer
from app.db.user_store import CredentialStore
from app.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        *,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ):
        self.store = store
        self.hasher = hasher
        self.issuer = issuer
        self.bcrypt_rounds = bcrypt_rounds

    def signup(self, *, email: str, password: str) -> None:
        """
        Register a new user.

        No token is returned; the client logs in separately.
        """
        try:
            if self.store.find_by_email(email) is not None:
                raise ConflictError("User already exists")

            password_hash = self.hasher.hash(password, self.bcrypt_rounds)
            user = self.store.insert(User(email=email, password_hash=password_hash))
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Signup error")
            raise InternalError() from exc

        logger.info("Registered user %s", user.id)

    def login(self, *, email: str, password: str) -> str:
        """
        Return a signed bearer token bound to the user's id.

        The id is carried in the standard ``sub`` claim (there is no ``id``
        claim); clients decoding the token should read ``sub``.
        """
        try:
            user = self.store.find_by_email(email)
            if user is None:
                raise NotFoundError("User not found")

            if not self.hasher.compare(password, user.password_hash):
                raise InvalidCredentialError("Invalid password")

            token = self.issuer.sign({"sub": user.id})
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Login error")
            raise InternalError() from exc

        logger.info("User %s logged in", user.id)
        return token

    def logout(self) -> None:
        # Issued tokens stay valid until the secret rotates; the HTTP
        # layer only clears the client's cookie.
        return None

    def authenticate(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Only used when order routes are configured to require auth.
        """
        claims = self.issuer.verify(token)
        user_id = claims.get("sub")
        user = self.store.find_by_id(user_id) if user_id else None
        if user is None:
            raise InvalidTokenError("Unknown user")
        return user
