# app/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

from app.application.use_cases.client_use_cases import AsyncClientService
from app.application.use_cases.password_use_cases import AsyncPasswordService

__all__ = [
    "AsyncClientService",
    "AsyncPasswordService",
]
