# app/adapters/outbound/persistence/repositories/client_repository.py (async version)

"""
Repository for client operations.

This module implements the repository that performs item store operations
related to clients, implementing the IClientRepository interface.
"""

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.application.dtos.client_dto import ClientInput
from app.application.ports.outbound import IClientRepository, Item
from app.domain.exceptions import ErrorCode, NotFoundException
from app.domain.models.client_domain_model import Client, Metadata

LOGIN_INDEX = "LoginIndex"


class AsyncClientCRUD(AsyncCRUDBase, IClientRepository):
    """
    Async implementation of the repository for the Client entity.

    Extends AsyncCRUDBase with client-specific operations,
    such as lookup by login through the LoginIndex.
    """

    entity = "client"
    key_attribute = "clientId"

    async def get_client_by_id(self, client_id: str) -> Client:
        """
        Find a client by client_id.

        Args:
            client_id: Client identifier

        Returns:
            Client found

        Raises:
            NotFoundException: If the client doesn't exist (ClientNotFound)
            ServiceUnavailableException: In case of store error
        """
        item = await self._get_by_key(client_id, ErrorCode.CLIENT_NOT_FOUND)
        return self.to_domain(item)

    async def get_client_by_login(self, login: str) -> Client:
        """
        Find a client by login.

        Logins are unique by contract of the service layer, so the first
        match is returned when the index holds more than one.

        Raises:
            NotFoundException: If no client uses the login (ClientNotFound)
            ServiceUnavailableException: In case of store error
        """
        items = await self._query_index(LOGIN_INDEX, "login", login)
        if not items:
            self.logger.info(f"Client not found by login {self._context(login=login)}")
            raise NotFoundException(
                message=f"No client exists with login '{login}'",
                error_code=ErrorCode.CLIENT_NOT_FOUND,
            )

        self.logger.info(f"Successfully found the client with the provided login {self._context(login=login)}")
        return self.to_domain(items[0])

    async def create_client(self, data: ClientInput) -> Client:
        """
        Create a new client with a generated identifier and fresh timestamps.

        Args:
            data: Login and (already encrypted) password

        Returns:
            The persisted client

        Raises:
            ServiceUnavailableException: In case of store error
        """
        now = self.now()
        client = Client(
            client_id=self.new_id(),
            login=data.login,
            password=data.password,
            metadata=Metadata(created_date=now, updated_date=now),
        )
        await self._save(self.to_item(client))
        return client

    async def update_client(self, client_id: str, data: ClientInput) -> Client:
        """
        Rewrite login and password of an existing client.

        Returns:
            The client as read back after the update

        Raises:
            ServiceUnavailableException: In case of store error, including
                when the client no longer exists
        """
        await self._update(client_id, {"login": data.login, "password": data.password})
        return await self.get_client_by_id(client_id)

    async def delete_client(self, client_id: str) -> None:
        """
        Delete a client by client_id.

        Raises:
            ServiceUnavailableException: In case of store error
        """
        await self._delete(client_id)

    def to_domain(self, item: Item) -> Client:
        """
        Convert a stored item to the domain model.

        Args:
            item: Client item as stored

        Returns:
            Domain model of client
        """
        metadata = item.get("metadata")
        return Client(
            client_id=item["clientId"],
            login=item["login"],
            password=item.get("password"),
            metadata=Metadata(
                created_date=metadata.get("createdDate"),
                updated_date=metadata.get("updatedDate"),
            ) if metadata else None,
        )

    def to_item(self, client: Client) -> Item:
        """Convert the domain model to the stored item shape."""
        item = {
            "clientId": client.client_id,
            "login": client.login,
            "password": client.password,
        }
        if client.metadata is not None:
            item["metadata"] = {
                "createdDate": client.metadata.created_date,
                "updatedDate": client.metadata.updated_date,
            }
        return item
