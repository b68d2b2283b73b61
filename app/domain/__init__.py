# app/domain/__init__.py

"""
Core domain components of the password manager.

This module exports the domain exceptions and error codes.
"""

from app.domain.exceptions import (
    ErrorCode,
    PasswordManagerException,      # Base domain exception
    NotFoundException,
    BadRequestException,
    ServiceUnavailableException,
    NotImplementedException,
)

__all__ = [
    "ErrorCode",
    "PasswordManagerException",
    "NotFoundException",
    "BadRequestException",
    "ServiceUnavailableException",
    "NotImplementedException",
]
