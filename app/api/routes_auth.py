# File: app/api/routes_auth.py

"""
Auth API routes: signup, login, logout.

Error bodies keep the ``{success: false, message}`` shape clients of this
API already parse.
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service
from app.core.errors import AppError
from app.schemas.user import (
    AuthErrorResponse,
    Credentials,
    LoginResponse,
    MessageResponse,
    SignupResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(tags=["auth"])

TOKEN_COOKIE = "token"


def _auth_error(exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=AuthErrorResponse(message=exc.message).model_dump(),
    )


@router.post(
    "/signup",
    response_model=SignupResponse,
    responses={400: {"model": AuthErrorResponse}, 500: {"model": AuthErrorResponse}},
    summary="Register a user",
)
def signup(payload: Credentials, auth: AuthService = Depends(get_auth_service)):
    try:
        auth.signup(email=payload.email, password=payload.password)
    except AppError as e:
        return _auth_error(e)
    return SignupResponse()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": AuthErrorResponse},
        404: {"model": AuthErrorResponse},
        500: {"model": AuthErrorResponse},
    },
    summary="Log in and receive a bearer token",
)
def login(payload: Credentials, auth: AuthService = Depends(get_auth_service)):
    try:
        token = auth.login(email=payload.email, password=payload.password)
    except AppError as e:
        return _auth_error(e)
    return LoginResponse(token=token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Log out (clears the token cookie only)",
)
def logout(response: Response, auth: AuthService = Depends(get_auth_service)):
    """
    Tokens are stateless, so nothing is invalidated server-side.
    """
    auth.logout()
    response.delete_cookie(TOKEN_COOKIE)
    return MessageResponse(message="Logged out successfully")
