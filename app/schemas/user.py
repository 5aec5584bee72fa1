# File: app/schemas/user.py

from pydantic import BaseModel


class Credentials(BaseModel):
    # Presence only; no format rules on either field
    email: str
    password: str


class SignupResponse(BaseModel):
    success: bool = True


class LoginResponse(BaseModel):
    success: bool = True
    token: str


class AuthErrorResponse(BaseModel):
    success: bool = False
    message: str


class MessageResponse(BaseModel):
    message: str
