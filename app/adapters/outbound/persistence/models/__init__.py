# app/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

This module exports the SQLAlchemy models of the system.
"""

from app.adapters.outbound.persistence.models.base_model import Base
from app.adapters.outbound.persistence.models.stored_item_model import StoredItem

__all__ = [
    "Base",
    "StoredItem",
]
