# app/application/use_cases/password_use_cases.py (async version)

"""
Service for the credential entries (passwords) of a client.

Values are encrypted on the way in and decrypted only on the read path.
Create and update return what the repository stored, so their value is
the ciphertext.
"""

import logging

from app.application.dtos.password_dto import (
    GetPasswordsResponse,
    PasswordData,
    PasswordInput,
    PasswordResponse,
    PasswordResult,
)
from app.application.ports.inbound import IPasswordUseCase
from app.application.ports.outbound import ICrypto, IPasswordRepository

logger = logging.getLogger(__name__)


class AsyncPasswordService(IPasswordUseCase):
    """Service for password management."""

    def __init__(self, password_repository: IPasswordRepository, crypto: ICrypto):
        self.password_repository = password_repository
        self.crypto = crypto

    def _encrypted(self, client_id: str, data: PasswordInput) -> PasswordData:
        return PasswordData(
            **data.model_dump(exclude={"value"}),
            value=self.crypto.encrypt(data.value),
            client_id=client_id,
        )

    async def get_passwords(self, client_id: str) -> GetPasswordsResponse:
        """
        Returns every password of the client with its value decrypted.

        Raises:
            NotFoundException: If the client owns no passwords
            ServiceUnavailableException: If the store fails
        """
        passwords = await self.password_repository.get_passwords_by_client_id(client_id)

        for password in passwords:
            password.value = self.crypto.decrypt(password.value)

        return GetPasswordsResponse(
            passwords=[PasswordResponse.model_validate(password) for password in passwords]
        )

    async def create_password(self, client_id: str, data: PasswordInput) -> PasswordResult:
        password = await self.password_repository.create_password(self._encrypted(client_id, data))
        logger.info(f"Password {password.password_id} created for client {client_id}")
        return PasswordResult(password=PasswordResponse.model_validate(password))

    async def update_password(self, client_id: str, password_id: str, data: PasswordInput) -> PasswordResult:
        """
        Replaces every field of an existing password.

        Raises:
            NotFoundException: If the password doesn't exist
            ServiceUnavailableException: If the store fails
        """
        await self.password_repository.get_password_by_id(password_id)

        password = await self.password_repository.update_password(
            password_id, self._encrypted(client_id, data)
        )
        logger.info(f"Password {password_id} updated for client {client_id}")
        return PasswordResult(password=PasswordResponse.model_validate(password))

    async def delete_password(self, password_id: str) -> None:
        await self.password_repository.delete_password(password_id)
