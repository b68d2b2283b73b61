# app/adapters/inbound/api/v1/endpoints/password_endpoint.py (async version)

"""
Endpoints for the credential entries (passwords) of a client.
"""

import logging
from fastapi import APIRouter, Depends, Path, Response, status

from app.adapters.inbound.api.deps import get_password_service
from app.application.dtos.password_dto import GetPasswordsResponse, PasswordInput, PasswordResult
from app.application.use_cases.password_use_cases import AsyncPasswordService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{client_id}/passwords",
    response_model=GetPasswordsResponse,
    summary="Get Passwords - List a client's passwords",
    description="Returns every password of the client with its value decrypted.",
    responses={
        404: {
            "description": "The client has no passwords",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 404,
                        "message": "No passwords exist for the client ID 'clientId'",
                        "errorCode": "PasswordNotFound"
                    }
                }
            }
        },
    }
)
async def get_passwords(
        client_id: str = Path(..., description="Client identifier"),
        service: AsyncPasswordService = Depends(get_password_service),
):
    return await service.get_passwords(client_id)


@router.post(
    "/{client_id}/passwords",
    response_model=PasswordResult,
    status_code=status.HTTP_201_CREATED,
    summary="Create Password - Store a new password",
    description="Encrypts and stores a new password for the client. The response echoes the stored (encrypted) value.",
)
async def create_password(
        data: PasswordInput,
        client_id: str = Path(..., description="Client identifier"),
        service: AsyncPasswordService = Depends(get_password_service),
):
    result = await service.create_password(client_id, data)
    result.status_code = status.HTTP_201_CREATED
    result.message = "Created"
    return result


@router.put(
    "/{client_id}/passwords/{password_id}",
    response_model=PasswordResult,
    summary="Update Password - Replace a stored password",
    description="Replaces every field of an existing password of the client.",
)
async def update_password(
        data: PasswordInput,
        client_id: str = Path(..., description="Client identifier"),
        password_id: str = Path(..., description="Password identifier"),
        service: AsyncPasswordService = Depends(get_password_service),
):
    return await service.update_password(client_id, password_id, data)


@router.delete(
    "/{client_id}/passwords/{password_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Password - Remove a stored password",
)
async def delete_password(
        client_id: str = Path(..., description="Client identifier"),
        password_id: str = Path(..., description="Password identifier"),
        service: AsyncPasswordService = Depends(get_password_service),
):
    await service.delete_password(password_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
