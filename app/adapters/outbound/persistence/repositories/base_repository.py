# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4
import logging

from app.application.ports.outbound import IItemStore, Item
from app.domain.exceptions import (
    ErrorCode,
    NotFoundException,
    ServiceUnavailableException,
)

READ_UNAVAILABLE_MESSAGE = "Service is temporarily unavailable."


class AsyncCRUDBase:
    """
    Async base class for implementing the Repository pattern over the item store.

    Provides the get/query/save/update/delete operations shared by every
    entity, with consistent error classification and logging: a missing
    item becomes a 404, any failure of the store becomes a 503.

    Attributes:
        store: Item store the repository reads and writes
        table_name: Logical table of the entity
        key_attribute: Key attribute of the table
        entity: Entity name used in messages
        logger: Configured logger for the class
    """

    entity: str = "item"
    key_attribute: str = "id"

    def __init__(self, store: IItemStore, table_name: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the repository with an item store.

        Args:
            store: Item store used for persistence
            table_name: Logical table associated with this repository
            logger: Logger to use, a per-table child logger by default
        """
        self.store = store
        self.table_name = table_name
        self.logger = logger or logging.getLogger(f"{__name__}.{table_name}")

    @staticmethod
    def new_id() -> str:
        """Generate an identifier for a new item."""
        return str(uuid4())

    @staticmethod
    def now() -> str:
        """Current time as an ISO-8601 timestamp."""
        return datetime.now(timezone.utc).isoformat()

    def _context(self, **keys: Any) -> str:
        details = ", ".join(f"{name}: {value}" for name, value in keys.items())
        return f"(table: {self.table_name}{', ' + details if details else ''})"

    def _unavailable(self, read: bool = False) -> ServiceUnavailableException:
        """
        Exception for a failed store call.

        Reads carry an explicit message, writes keep the default one.
        """
        return ServiceUnavailableException(
            message=READ_UNAVAILABLE_MESSAGE if read else None,
            error_code=ErrorCode.STORAGE_DOWN,
        )

    async def _get_by_key(self, key_value: str, not_found_code: ErrorCode) -> Item:
        """
        Get an item by its key.

        Raises:
            NotFoundException: If no item exists for the key
            ServiceUnavailableException: If the store fails
        """
        command = {
            "TableName": self.table_name,
            "Key": {self.key_attribute: key_value},
        }
        try:
            result = await self.store.get(self.table_name, command)
        except Exception as e:
            self.logger.error(
                f"Failed to find the {self.entity} by ID {self._context(**{self.key_attribute: key_value})}: {str(e)}"
            )
            raise self._unavailable(read=True)

        item = (result or {}).get("Item")
        if not item:
            self.logger.warning(
                f"Couldn't find the {self.entity} by ID {self._context(**{self.key_attribute: key_value})}"
            )
            raise NotFoundException(
                message=f"No {self.entity} exists with ID '{key_value}'",
                error_code=not_found_code,
            )

        self.logger.info(f"Found {self.entity} by ID {self._context()}")
        return item

    async def _query_index(self, index_name: str, attribute: str, value: str) -> List[Item]:
        """
        Query a secondary index with an equality condition.

        Returns:
            Matching items, an empty list when the store returns none

        Raises:
            ServiceUnavailableException: If the store fails
        """
        command = {
            "TableName": self.table_name,
            "IndexName": index_name,
            "KeyConditionExpression": f"{attribute} = :{attribute}",
            "ExpressionAttributeValues": {f":{attribute}": value},
        }
        try:
            result = await self.store.query(self.table_name, command)
        except Exception as e:
            self.logger.error(
                f"Failed to query {index_name} {self._context(**{attribute: value})}: {str(e)}"
            )
            raise self._unavailable(read=True)
        return (result or {}).get("Items") or []

    async def _save(self, item: Item) -> Item:
        """
        Persist a whole item.

        Raises:
            ServiceUnavailableException: If the store fails
        """
        try:
            await self.store.save(self.table_name, item)
        except Exception as e:
            self.logger.error(f"Failed to create a new {self.entity} {self._context()}: {str(e)}")
            raise self._unavailable()

        self.logger.info(f"Successfully created a new {self.entity} {self._context()}")
        return item

    async def _update(self, key_value: str, fields: Dict[str, Any]) -> None:
        """
        Rewrite the given attributes of an existing item and refresh its updatedDate.

        The write is conditional on the item existing; a failed condition is
        classified like any other store failure.

        Raises:
            ServiceUnavailableException: If the store fails or the item doesn't exist
        """
        clauses = [f"#{name} = :{name}" for name in fields]
        clauses.append("metadata.#updatedDate = :updatedDate")

        names = {f"#{name}": name for name in fields}
        names["#updatedDate"] = "updatedDate"

        values = {f":{name}": value for name, value in fields.items()}
        values[":updatedDate"] = self.now()

        command = {
            "TableName": self.table_name,
            "Key": {self.key_attribute: key_value},
            "UpdateExpression": "set " + ", ".join(clauses),
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
            "ConditionExpression": f"attribute_exists({self.key_attribute})",
        }
        try:
            await self.store.update(self.table_name, command)
        except Exception as e:
            self.logger.error(
                f"Failed to update {self.entity} {self._context(**{self.key_attribute: key_value})}: {str(e)}"
            )
            raise self._unavailable()

        self.logger.info(
            f"Successfully updated the {self.entity} {self._context(**{self.key_attribute: key_value})}"
        )

    async def _delete(self, key_value: str) -> None:
        """
        Delete an item by key. A missing key is not an error.

        Raises:
            ServiceUnavailableException: If the store fails
        """
        command = {
            "TableName": self.table_name,
            "Key": {self.key_attribute: key_value},
        }
        try:
            await self.store.delete(self.table_name, command)
        except Exception as e:
            self.logger.error(
                f"Failed to delete {self.entity} {self._context(**{self.key_attribute: key_value})}: {str(e)}"
            )
            raise self._unavailable()

        self.logger.info(
            f"Successfully deleted {self.entity} {self._context(**{self.key_attribute: key_value})}"
        )
