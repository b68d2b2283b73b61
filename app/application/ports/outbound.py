# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from app.application.dtos.client_dto import ClientInput
from app.application.dtos.password_dto import PasswordData
from app.domain.models.client_domain_model import Client
from app.domain.models.password_domain_model import Password

Item = Dict[str, Any]


class IItemStore(ABC):
    """
    Key/value store with secondary indexes.

    Every call addresses a logical table by name and takes the command
    shape of a document store: ``Key``, ``IndexName``,
    ``KeyConditionExpression``, ``UpdateExpression``, ``ConditionExpression``
    and the matching attribute name/value maps.
    """

    @abstractmethod
    async def get(self, table: str, command: Dict[str, Any]) -> Dict[str, Any]:
        """Return ``{"Item": item}``, with ``None`` when the key is absent."""
        pass

    @abstractmethod
    async def query(self, table: str, command: Dict[str, Any]) -> Dict[str, Any]:
        """Return ``{"Items": [...]}`` for a key condition on an index."""
        pass

    @abstractmethod
    async def save(self, table: str, item: Item) -> None:
        """Write a whole item, replacing any previous version."""
        pass

    @abstractmethod
    async def update(self, table: str, command: Dict[str, Any]) -> None:
        """Apply an update expression; fails when the condition is not met."""
        pass

    @abstractmethod
    async def delete(self, table: str, command: Dict[str, Any]) -> None:
        """Delete an item by key. Deleting a missing key is not an error."""
        pass

    @abstractmethod
    async def batch_delete(self, table: str, keys: List[Item]) -> None:
        """Delete several items by key in a single request."""
        pass


class ICrypto(ABC):
    """Reversible encryption of credential values."""

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plain text value."""
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value produced by encrypt."""
        pass


class IClientRepository(ABC):
    """Client repository interface."""

    @abstractmethod
    async def get_client_by_id(self, client_id: str) -> Client:
        """Get client by client_id."""
        pass

    @abstractmethod
    async def get_client_by_login(self, login: str) -> Client:
        """Get client by login."""
        pass

    @abstractmethod
    async def create_client(self, data: ClientInput) -> Client:
        """Create a new client."""
        pass

    @abstractmethod
    async def update_client(self, client_id: str, data: ClientInput) -> Client:
        """Update login and password of an existing client."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> None:
        """Delete a client by client_id."""
        pass


class IPasswordRepository(ABC):
    """Password repository interface."""

    @abstractmethod
    async def get_password_by_id(self, password_id: str) -> Password:
        """Get a credential entry by password_id."""
        pass

    @abstractmethod
    async def get_passwords_by_client_id(self, client_id: str) -> List[Password]:
        """Get every credential entry owned by a client."""
        pass

    @abstractmethod
    async def create_password(self, data: PasswordData) -> Password:
        """Create a new credential entry."""
        pass

    @abstractmethod
    async def update_password(self, password_id: str, data: PasswordData) -> Password:
        """Update an existing credential entry."""
        pass

    @abstractmethod
    async def delete_password(self, password_id: str) -> None:
        """Delete a credential entry by password_id."""
        pass

    @abstractmethod
    async def delete_passwords_for_client_id(self, client_id: str) -> None:
        """Delete every credential entry owned by a client."""
        pass
