# app/application/ports/inbound.py

from abc import ABC, abstractmethod

from app.application.dtos.client_dto import ClientInput, CreateClientResponse, UpdateClientResponse
from app.application.dtos.password_dto import GetPasswordsResponse, PasswordInput, PasswordResult


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def create_client(self, data: ClientInput) -> CreateClientResponse:
        """Create a new client with a unique login."""
        pass

    @abstractmethod
    async def update_client(self, client_id: str, data: ClientInput) -> UpdateClientResponse:
        """Update login and password of an existing client."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> None:
        """Delete a client together with its passwords."""
        pass


class IPasswordUseCase(ABC):
    """Interface for password-related use cases."""

    @abstractmethod
    async def get_passwords(self, client_id: str) -> GetPasswordsResponse:
        """Return the decrypted credential entries of a client."""
        pass

    @abstractmethod
    async def create_password(self, client_id: str, data: PasswordInput) -> PasswordResult:
        """Store a new credential entry for a client."""
        pass

    @abstractmethod
    async def update_password(self, client_id: str, password_id: str, data: PasswordInput) -> PasswordResult:
        """Replace the fields of an existing credential entry."""
        pass

    @abstractmethod
    async def delete_password(self, password_id: str) -> None:
        """Delete a credential entry."""
        pass
