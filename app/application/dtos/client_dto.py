# app/application/dtos/client_dto.py

"""
Schemas for client data.

This module defines the Pydantic DTOs used to validate client requests
and to serialize client responses. Responses never carry the client's
password, not even in encrypted form.
"""

from typing import Optional

from pydantic import Field

from app.application.dtos.base_dto import CustomBaseModel, MetadataResponse, PasswordManagerResponse


class ClientInput(CustomBaseModel):
    """
    Schema for creating or updating a client.

    The password arrives in plain text and is encrypted by the service
    before it reaches the repository.
    """
    login: str = Field(..., min_length=1, description="Unique login of the client")
    password: str = Field(..., min_length=1, description="Client password")


class ClientResponse(CustomBaseModel):
    """
    Schema for returning client data.

    Used to return the client through the API without exposing sensitive data.
    """
    client_id: str = Field(..., description="Unique identifier of the client")
    login: str = Field(..., description="Login of the client")
    metadata: Optional[MetadataResponse] = Field(None, description="Creation and update timestamps")


class CreateClientResponse(PasswordManagerResponse):
    """Envelope for create and update client results."""
    client: ClientResponse


class UpdateClientResponse(CreateClientResponse):
    pass
