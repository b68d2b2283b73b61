# app/application/dtos/password_dto.py

"""
Schemas for the credential entries (passwords) of a client.
"""

from typing import List, Optional

from pydantic import Field

from app.application.dtos.base_dto import CustomBaseModel, MetadataResponse, PasswordManagerResponse


class PasswordInput(CustomBaseModel):
    """Schema for creating or updating a credential entry."""
    name: str = Field(..., min_length=1, description="Display label")
    website: Optional[str] = Field(None, description="Website the credential belongs to")
    login: str = Field(..., description="Username of the credential")
    value: str = Field(..., description="Secret of the credential")


class PasswordData(PasswordInput):
    """
    Credential entry as handed to the repository.

    Extends PasswordInput with the owning client; the value is already
    encrypted at this point.
    """
    client_id: str = Field(..., description="Identifier of the owning client")


class PasswordResponse(CustomBaseModel):
    """
    Schema for returning a credential entry.

    The value is plain text on the read path and ciphertext when echoed
    back from a create or update.
    """
    password_id: str
    name: str
    website: Optional[str] = None
    login: str
    value: str
    client_id: str
    metadata: Optional[MetadataResponse] = None


class GetPasswordsResponse(PasswordManagerResponse):
    """Envelope for the list of a client's credential entries."""
    passwords: List[PasswordResponse]


class PasswordResult(PasswordManagerResponse):
    """Envelope for a single credential entry."""
    password: PasswordResponse
