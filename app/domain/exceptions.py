# app/domain/exceptions.py

"""
Custom exceptions for the application.

This module defines the single domain exception kind raised by the
repositories and services. Every instance carries the HTTP status code,
a human readable message and an error code from a fixed enumeration so
the presentation layer can map it directly onto a response.
"""

from enum import Enum
from typing import Optional

from fastapi import status


class ErrorCode(str, Enum):
    """Fixed enumeration of error codes exposed to callers."""

    CLIENT_NOT_FOUND = "ClientNotFound"
    PASSWORD_NOT_FOUND = "PasswordNotFound"
    LOGIN_ALREADY_EXISTS = "LoginAlreadyExists"
    STORAGE_DOWN = "StorageDown"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    NOT_FOUND = "NotFound"
    BAD_REQUEST = "BadRequest"
    NOT_IMPLEMENTED = "NotImplemented"
    INTERNAL_SERVER_ERROR = "InternalServerError"


class PasswordManagerException(Exception):
    """
    Base exception for every domain failure of the password manager.

    Subclasses only provide defaults; callers narrow the message and the
    error code to the context in which the failure happened.
    """

    default_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"
    default_error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(
            self,
            message: Optional[str] = None,
            error_code: Optional[ErrorCode] = None,
            status_code: Optional[int] = None,
    ):
        self.status_code = status_code or self.default_status_code
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Body of the error response."""
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "errorCode": self.error_code.value,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"message={self.message!r}, error_code={self.error_code.value})"
        )


class NotFoundException(PasswordManagerException):
    """Resource not found."""

    default_status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"
    default_error_code = ErrorCode.NOT_FOUND


class BadRequestException(PasswordManagerException):
    """Request rejected by a business rule."""

    default_status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"
    default_error_code = ErrorCode.BAD_REQUEST


class ServiceUnavailableException(PasswordManagerException):
    """The storage layer could not serve the request."""

    default_status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service Unavailable"
    default_error_code = ErrorCode.SERVICE_UNAVAILABLE


class NotImplementedException(PasswordManagerException):
    """Handler exists but has no behaviour yet."""

    default_status_code = status.HTTP_501_NOT_IMPLEMENTED
    default_message = "Not Implemented"
    default_error_code = ErrorCode.NOT_IMPLEMENTED
