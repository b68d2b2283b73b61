# app/domain/models/__init__.py

from app.domain.models.client_domain_model import Client, Metadata
from app.domain.models.password_domain_model import Password

__all__ = ["Client", "Metadata", "Password"]
