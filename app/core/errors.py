# File: app/core/errors.py

"""
Error taxonomy shared by stores, services and routers.

Services raise these; routers turn them into JSON responses using
``status_code`` and ``message``.
"""


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 400
    default_message = "Already exists"


class InvalidCredentialError(AppError):
    status_code = 400
    default_message = "Invalid password"


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class InvalidTokenError(AppError):
    status_code = 401
    default_message = "Invalid or missing token"


class InternalError(AppError):
    status_code = 500
    default_message = "Server error"
