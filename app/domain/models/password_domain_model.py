# app/domain/models/password_domain_model.py

from dataclasses import dataclass
from typing import Optional

from app.domain.models.client_domain_model import Metadata


@dataclass
class Password:
    """Domain model for a credential entry owned by a client."""
    password_id: str
    name: str
    login: str
    value: str  # Encrypted at rest, plaintext only on the read path
    client_id: str  # Owning client
    website: Optional[str] = None
    metadata: Optional[Metadata] = None
