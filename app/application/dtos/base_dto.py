# app/application/dtos/base_dto.py

"""
Base class for the application DTOs.

This module defines CustomBaseModel, which extends Pydantic's BaseModel
with the conventions shared by every DTO of the API: snake_case
attributes in Python and camelCase names on the wire.
"""

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Custom base model for all DTOs of the application.

    Accepts both camelCase (wire) and snake_case (Python) field names on
    input, can be built from domain dataclasses, and serializes with the
    camelCase aliases by default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """Dump the model with camelCase keys, keeping explicit nulls."""
        return self.model_dump(by_alias=True)


class MetadataResponse(CustomBaseModel):
    """Audit timestamps of a stored record."""
    created_date: str = Field(..., description="ISO-8601 creation timestamp")
    updated_date: str = Field(..., description="ISO-8601 timestamp of the last mutation")


class PasswordManagerResponse(CustomBaseModel):
    """
    Envelope shared by every successful response.

    Endpoints adjust status_code and message to the HTTP status they send.
    """
    status_code: int = Field(status.HTTP_200_OK, description="HTTP status of the response")
    message: str = Field("Ok", description="Short status message")
