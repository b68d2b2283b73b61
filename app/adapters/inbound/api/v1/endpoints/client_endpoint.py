# app/adapters/inbound/api/v1/endpoints/client_endpoint.py (async version)

"""
Endpoints for client management.

This module contains the routes that create, update and delete password
manager clients. Responses never include the client's password.
"""

import logging
from fastapi import APIRouter, Depends, Path, Response, status

from app.adapters.inbound.api.deps import get_client_service
from app.application.dtos.client_dto import ClientInput, CreateClientResponse, UpdateClientResponse
from app.application.use_cases.client_use_cases import AsyncClientService

logger = logging.getLogger(__name__)

router = APIRouter()

CLIENT_EXAMPLE = {
    "clientId": "0b4f3c4e-8a7d-4a8e-9a57-2f5d8c1e6b90",
    "login": "jdoe",
    "metadata": {
        "createdDate": "2024-01-01T00:00:00.000000+00:00",
        "updatedDate": "2024-01-01T00:00:00.000000+00:00",
    },
}


@router.post(
    "",
    response_model=CreateClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Client - Register a new client",
    description="Creates a client with a unique login. The password is stored encrypted and never returned.",
    responses={
        201: {
            "description": "Client created",
            "content": {
                "application/json": {
                    "example": {"statusCode": 201, "message": "Created", "client": CLIENT_EXAMPLE}
                }
            }
        },
        400: {
            "description": "Login already in use",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 400,
                        "message": "Login is already in use",
                        "errorCode": "LoginAlreadyExists"
                    }
                }
            }
        },
    }
)
async def create_client(
        data: ClientInput,
        service: AsyncClientService = Depends(get_client_service),
):
    result = await service.create_client(data)
    result.status_code = status.HTTP_201_CREATED
    result.message = "Created"
    return result


@router.put(
    "/{client_id}",
    response_model=UpdateClientResponse,
    summary="Update Client - Change login and password",
    description="Updates the login and password of an existing client.",
    responses={
        404: {
            "description": "Client not found",
            "content": {
                "application/json": {
                    "example": {"statusCode": 404, "message": "Login not found", "errorCode": "ClientNotFound"}
                }
            }
        },
    }
)
async def update_client(
        data: ClientInput,
        client_id: str = Path(..., description="Client identifier"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.update_client(client_id, data)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Client - Remove a client and its passwords",
    description="Deletes every password of the client, then the client itself.",
)
async def delete_client(
        client_id: str = Path(..., description="Client identifier"),
        service: AsyncClientService = Depends(get_client_service),
):
    await service.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
