# File: app/api/deps.py

from datetime import timedelta
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.errors import InvalidTokenError
from app.core.security import PasswordHasher, TokenIssuer
from app.db.order_store import OrderStore
from app.db.session import get_db
from app.db.user_store import CredentialStore
from app.services.auth_service import AuthService
from app.services.order_service import OrderService


def build_token_issuer(settings: Settings) -> TokenIssuer:
    expires = (
        timedelta(minutes=settings.access_token_expire_minutes)
        if settings.access_token_expire_minutes > 0
        else None
    )
    return TokenIssuer(settings.secret_key, settings.algorithm, expires)


def build_auth_service(db: Session, settings: Settings) -> AuthService:
    return AuthService(
        CredentialStore(db),
        PasswordHasher(settings.bcrypt_rounds),
        build_token_issuer(settings),
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    FastAPI dependency that builds an AuthService for the current request.

    Usage in route functions:
        auth: AuthService = Depends(get_auth_service)
    """
    return build_auth_service(db, settings)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(OrderStore(db))


def orders_guard(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
) -> None:
    """
    Bearer-token check for the order routes.

    A no-op unless ``orders_require_auth`` is enabled; the token issuer is
    only built once the check is on.
    """
    if not settings.orders_require_auth:
        return
    if not authorization or not authorization.lower().startswith("bearer "):
        raise InvalidTokenError("Missing or invalid Authorization header")
    auth = build_auth_service(db, settings)
    auth.authenticate(authorization.split(" ", 1)[1].strip())
