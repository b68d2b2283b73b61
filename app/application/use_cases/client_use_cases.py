# app/application/use_cases/client_use_cases.py (async version)

"""
Service for client management.

This module implements the business rules for password manager clients:
login uniqueness, encryption of the client's password before it is
stored, and the cascading delete of a client's passwords.
"""

import logging

from app.application.dtos.client_dto import (
    ClientInput,
    ClientResponse,
    CreateClientResponse,
    UpdateClientResponse,
)
from app.application.ports.inbound import IClientUseCase
from app.application.ports.outbound import ICrypto, IClientRepository, IPasswordRepository
from app.domain.exceptions import BadRequestException, ErrorCode, NotFoundException

logger = logging.getLogger(__name__)


class AsyncClientService(IClientUseCase):
    """
    Service for client management.

    Uniqueness of the login is checked with a lookup before the write, so
    two concurrent creates with the same login can both succeed.
    """

    def __init__(
            self,
            client_repository: IClientRepository,
            password_repository: IPasswordRepository,
            crypto: ICrypto,
    ):
        self.client_repository = client_repository
        self.password_repository = password_repository
        self.crypto = crypto

    async def _login_exists(self, login: str) -> bool:
        try:
            await self.client_repository.get_client_by_login(login)
        except NotFoundException:
            return False
        return True

    async def create_client(self, data: ClientInput) -> CreateClientResponse:
        """
        Creates a new client after checking that the login is free.
        The password is encrypted before it is stored and never returned.

        Raises:
            BadRequestException: If the login is already in use (LoginAlreadyExists)
            ServiceUnavailableException: If the store fails
        """
        if await self._login_exists(data.login):
            logger.warning(f"Attempt to create a client with a login already in use: {data.login}")
            raise BadRequestException(
                message="Login is already in use",
                error_code=ErrorCode.LOGIN_ALREADY_EXISTS,
            )

        encrypted = data.model_copy(update={"password": self.crypto.encrypt(data.password)})
        client = await self.client_repository.create_client(encrypted)

        logger.info(f"Client created: {client.client_id}")
        return CreateClientResponse(client=ClientResponse.model_validate(client))

    async def update_client(self, client_id: str, data: ClientInput) -> UpdateClientResponse:
        """
        Updates login and password of an existing client.

        Raises:
            NotFoundException: If the client doesn't exist ("Login not found")
            ServiceUnavailableException: If the store fails
        """
        try:
            await self.client_repository.get_client_by_id(client_id)
        except NotFoundException:
            logger.warning(f"Attempt to update a client that doesn't exist: {client_id}")
            raise NotFoundException(message="Login not found", error_code=ErrorCode.CLIENT_NOT_FOUND) from None

        encrypted = data.model_copy(update={"password": self.crypto.encrypt(data.password)})
        client = await self.client_repository.update_client(client_id, encrypted)

        logger.info(f"Client updated: {client_id}")
        return UpdateClientResponse(client=ClientResponse.model_validate(client))

    async def delete_client(self, client_id: str) -> None:
        """
        Deletes the client's passwords, then the client itself.

        Both steps are attempted once, in that order, even when the first
        one fails; the first failure is raised afterwards. Nothing is rolled
        back.
        """
        failure = None
        try:
            await self.password_repository.delete_passwords_for_client_id(client_id)
        except Exception as e:
            logger.error(f"Deleting the passwords of client {client_id} failed: {e!r}")
            failure = e

        await self.client_repository.delete_client(client_id)

        if failure is not None:
            raise failure

        logger.info(f"Client deleted with its passwords: {client_id}")
