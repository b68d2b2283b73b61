# app/adapters/outbound/persistence/repositories/password_repository.py (async version)

"""
Repository for the credential entries (passwords) of a client.
"""

from typing import List

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.application.dtos.password_dto import PasswordData
from app.application.ports.outbound import IPasswordRepository, Item
from app.domain.exceptions import ErrorCode, NotFoundException
from app.domain.models.client_domain_model import Metadata
from app.domain.models.password_domain_model import Password

CLIENT_ID_INDEX = "ClientIdIndex"


class AsyncPasswordCRUD(AsyncCRUDBase, IPasswordRepository):
    """
    Async implementation of the repository for the Password entity.

    Passwords are looked up by owner through the ClientIdIndex; unlike the
    login lookup of clients, every match is returned.
    """

    entity = "password"
    key_attribute = "passwordId"

    async def get_password_by_id(self, password_id: str) -> Password:
        """
        Find a password by password_id.

        Raises:
            NotFoundException: If the password doesn't exist (PasswordNotFound)
            ServiceUnavailableException: In case of store error
        """
        item = await self._get_by_key(password_id, ErrorCode.PASSWORD_NOT_FOUND)
        return self.to_domain(item)

    async def get_passwords_by_client_id(self, client_id: str) -> List[Password]:
        """
        List the passwords owned by a client, in store order.

        Raises:
            NotFoundException: If the client owns no passwords (PasswordNotFound)
            ServiceUnavailableException: In case of store error
        """
        items = await self._query_index(CLIENT_ID_INDEX, "clientId", client_id)
        if not items:
            self.logger.info(f"No passwords were found for client {self._context(clientId=client_id)}")
            raise NotFoundException(
                message=f"No passwords exist for the client ID '{client_id}'",
                error_code=ErrorCode.PASSWORD_NOT_FOUND,
            )

        self.logger.info(f"Successfully found passwords for client {self._context(clientId=client_id)}")
        return [self.to_domain(item) for item in items]

    async def create_password(self, data: PasswordData) -> Password:
        """
        Create a new password with a generated identifier and fresh timestamps.

        Raises:
            ServiceUnavailableException: In case of store error
        """
        now = self.now()
        password = Password(
            password_id=self.new_id(),
            name=data.name,
            website=data.website,
            login=data.login,
            value=data.value,
            client_id=data.client_id,
            metadata=Metadata(created_date=now, updated_date=now),
        )
        await self._save(self.to_item(password))
        return password

    async def update_password(self, password_id: str, data: PasswordData) -> Password:
        """
        Rewrite every field of an existing password.

        Returns:
            The password as read back after the update

        Raises:
            ServiceUnavailableException: In case of store error, including
                when the password no longer exists
        """
        await self._update(password_id, {
            "name": data.name,
            "website": data.website,
            "login": data.login,
            "value": data.value,
            "clientId": data.client_id,
        })
        return await self.get_password_by_id(password_id)

    async def delete_password(self, password_id: str) -> None:
        """
        Delete a password by password_id.

        Raises:
            ServiceUnavailableException: In case of store error
        """
        await self._delete(password_id)

    async def delete_passwords_for_client_id(self, client_id: str) -> None:
        """
        Delete every password of a client with a single batch request.

        The owner's passwords are read first and the batch is built from that
        snapshot; a password created in between is not part of the batch.

        Raises:
            ServiceUnavailableException: In case of store error
        """
        try:
            passwords = await self.get_passwords_by_client_id(client_id)
        except NotFoundException:
            self.logger.info(f"No passwords to delete for client {self._context(clientId=client_id)}")
            return

        keys = [{self.key_attribute: password.password_id} for password in passwords]
        try:
            await self.store.batch_delete(self.table_name, keys)
        except Exception as e:
            self.logger.error(
                f"Failed to delete passwords for client {self._context(clientId=client_id)}: {str(e)}"
            )
            raise self._unavailable()

        self.logger.info(
            f"Successfully deleted {len(keys)} password(s) for client {self._context(clientId=client_id)}"
        )

    def to_domain(self, item: Item) -> Password:
        """
        Convert a stored item to the domain model.

        Only website and metadata are optional.

        Raises:
            KeyError: If a required attribute is missing from the item
        """
        metadata = item.get("metadata")
        return Password(
            password_id=item["passwordId"],
            name=item["name"],
            website=item.get("website"),
            login=item["login"],
            value=item["value"],
            client_id=item["clientId"],
            metadata=Metadata(
                created_date=metadata.get("createdDate"),
                updated_date=metadata.get("updatedDate"),
            ) if metadata else None,
        )

    def to_item(self, password: Password) -> Item:
        """Convert the domain model to the stored item shape."""
        item = {
            "passwordId": password.password_id,
            "name": password.name,
            "website": password.website,
            "login": password.login,
            "value": password.value,
            "clientId": password.client_id,
        }
        if password.metadata is not None:
            item["metadata"] = {
                "createdDate": password.metadata.created_date,
                "updatedDate": password.metadata.updated_date,
            }
        return item
