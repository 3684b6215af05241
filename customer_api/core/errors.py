# customer_api/core/errors.py

from fastapi import status


class AppError(Exception):
    """
    Base class for failures that map onto an HTTP response.
    The message is sent to the caller as plain text.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class Conflict(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentials(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class MissingToken(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Access Denied"):
        super().__init__(message)


class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Invalid Token"):
        super().__init__(message)


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
