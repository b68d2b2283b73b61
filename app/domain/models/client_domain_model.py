# app/domain/models/client_domain_model.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Metadata:
    """Audit timestamps shared by every stored record (ISO-8601 strings)."""
    created_date: str
    updated_date: str


@dataclass
class Client:
    """Domain model for a password manager client (account owner)."""
    client_id: str  # Public identifier, immutable
    login: str  # Unique across clients, enforced by the service layer
    password: str  # Encrypted credential
    metadata: Optional[Metadata] = None
