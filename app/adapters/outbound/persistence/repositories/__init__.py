# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repositories module.

This module exports the repository classes for the entities stored in
the item store, implementing the Repository pattern.
"""

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.client_repository import AsyncClientCRUD
from app.adapters.outbound.persistence.repositories.password_repository import AsyncPasswordCRUD

__all__ = [
    "AsyncCRUDBase",
    "AsyncClientCRUD",
    "AsyncPasswordCRUD",
]
