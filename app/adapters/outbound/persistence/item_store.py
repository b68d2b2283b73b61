# app/adapters/outbound/persistence/item_store.py (async version)

"""
Item store backed by SQLAlchemy.

This module implements the IItemStore port on top of a single table of
JSON documents. It understands the small subset of document-store
expressions the repositories use:

- key conditions of the form ``attr = :value``
- update expressions of the form ``set path = :value, ...`` where a path
  may be dotted (``metadata.#updatedDate``) and use ``#name`` placeholders
- ``attribute_exists(attr)`` / ``attribute_not_exists(attr)`` conditions
"""

import copy
import logging
import re
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete as sql_delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.adapters.outbound.persistence.models import StoredItem
from app.application.ports.outbound import IItemStore, Item

# Configure logger
logger = logging.getLogger(__name__)

_KEY_CONDITION = re.compile(r"^\s*(#?\w+)\s*=\s*(:\w+)\s*$")
_SET_CLAUSE = re.compile(r"^\s*([#\w.]+)\s*=\s*(:\w+)\s*$")
_CONDITION = re.compile(r"^\s*(attribute_exists|attribute_not_exists)\(\s*(#?\w+)\s*\)\s*$")


class ItemStoreError(Exception):
    """The command could not be executed by the item store."""


class ConditionalCheckFailedError(ItemStoreError):
    """The ConditionExpression of a write was not satisfied."""


class SQLAlchemyItemStore(IItemStore):
    """
    Async implementation of the item store over an SQLAlchemy session.

    Attributes:
        db: Async database session, one per request
        key_attributes: Key attribute of each logical table
    """

    def __init__(self, db: AsyncSession, key_attributes: Dict[str, str]):
        self.db = db
        self.key_attributes = dict(key_attributes)
        self.logger = logger

    async def get(self, table: str, command: Dict[str, Any]) -> Dict[str, Any]:
        async with self._unit_of_work("get", table, commit=False):
            row = await self._load(table, self._key_of(table, command["Key"]))
            return {"Item": copy.deepcopy(row.document) if row is not None else None}

    async def query(self, table: str, command: Dict[str, Any]) -> Dict[str, Any]:
        names = command.get("ExpressionAttributeNames") or {}
        values = command.get("ExpressionAttributeValues") or {}

        match = _KEY_CONDITION.match(command.get("KeyConditionExpression", ""))
        if not match:
            raise ItemStoreError(f"Unsupported key condition: {command.get('KeyConditionExpression')!r}")
        attribute = self._resolve(match.group(1), names)
        value = self._value(match.group(2), values)

        async with self._unit_of_work("query", table, commit=False):
            stmt = select(StoredItem).where(
                StoredItem.table_name == table,
                StoredItem.document[attribute].as_string() == str(value),
            )
            result = await self.db.execute(stmt)
            rows = result.scalars().all()

        self.logger.debug(
            f"Query on '{table}' (index {command.get('IndexName', 'N/A')}) returned {len(rows)} item(s)"
        )
        return {"Items": [copy.deepcopy(row.document) for row in rows]}

    async def save(self, table: str, item: Item) -> None:
        async with self._unit_of_work("save", table):
            item_key = self._key_of(table, item)
            await self.db.merge(
                StoredItem(table_name=table, item_key=item_key, document=copy.deepcopy(item))
            )

    async def update(self, table: str, command: Dict[str, Any]) -> None:
        names = command.get("ExpressionAttributeNames") or {}
        values = command.get("ExpressionAttributeValues") or {}
        assignments = self._parse_update(command.get("UpdateExpression", ""), names, values)

        async with self._unit_of_work("update", table):
            key = command["Key"]
            item_key = self._key_of(table, key)
            row = await self._load(table, item_key)

            condition = command.get("ConditionExpression")
            if condition and not self._condition_holds(condition, names, row):
                raise ConditionalCheckFailedError(
                    f"Condition '{condition}' failed for key '{item_key}' on table '{table}'"
                )

            document = copy.deepcopy(row.document) if row is not None else dict(key)
            for path, value in assignments:
                self._assign(document, path, value)

            if row is None:
                self.db.add(StoredItem(table_name=table, item_key=item_key, document=document))
            else:
                # Assign a new object so the JSON column is flagged as modified
                row.document = document

    async def delete(self, table: str, command: Dict[str, Any]) -> None:
        async with self._unit_of_work("delete", table):
            await self._delete_keys(table, [self._key_of(table, command["Key"])])

    async def batch_delete(self, table: str, keys: List[Item]) -> None:
        async with self._unit_of_work("batch_delete", table):
            item_keys = [self._key_of(table, key) for key in keys]
            if item_keys:
                await self._delete_keys(table, item_keys)

    ########################################################################
    # Helpers
    ########################################################################

    @asynccontextmanager
    async def _unit_of_work(self, operation: str, table: str, commit: bool = True):
        """Commit on success, roll back and re-raise database errors."""
        try:
            yield
            if commit:
                await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Item store {operation} failed on table '{table}': {str(e)}")
            raise

    async def _load(self, table: str, item_key: str) -> Optional[StoredItem]:
        return await self.db.get(StoredItem, (table, item_key))

    async def _delete_keys(self, table: str, item_keys: List[str]) -> None:
        await self.db.execute(
            sql_delete(StoredItem).where(
                StoredItem.table_name == table,
                StoredItem.item_key.in_(item_keys),
            )
        )

    def _key_of(self, table: str, key: Item) -> str:
        try:
            attribute = self.key_attributes[table]
        except KeyError:
            raise ItemStoreError(f"Unknown table '{table}'")
        if key.get(attribute) is None:
            raise ItemStoreError(f"Missing key attribute '{attribute}' for table '{table}'")
        return str(key[attribute])

    @staticmethod
    def _resolve(token: str, names: Dict[str, str]) -> str:
        if token.startswith("#"):
            try:
                return names[token]
            except KeyError:
                raise ItemStoreError(f"Undefined attribute name placeholder '{token}'")
        return token

    @staticmethod
    def _value(placeholder: str, values: Dict[str, Any]) -> Any:
        try:
            return values[placeholder]
        except KeyError:
            raise ItemStoreError(f"Undefined attribute value placeholder '{placeholder}'")

    def _parse_update(
            self, expression: str, names: Dict[str, str], values: Dict[str, Any]
    ) -> List[Tuple[List[str], Any]]:
        head, _, body = expression.strip().partition(" ")
        if head.lower() != "set" or not body.strip():
            raise ItemStoreError(f"Unsupported update expression: {expression!r}")

        assignments = []
        for clause in body.split(","):
            match = _SET_CLAUSE.match(clause)
            if not match:
                raise ItemStoreError(f"Unsupported update clause: {clause.strip()!r}")
            path = [self._resolve(part, names) for part in match.group(1).split(".")]
            assignments.append((path, self._value(match.group(2), values)))
        return assignments

    def _condition_holds(self, condition: str, names: Dict[str, str], row: Optional[StoredItem]) -> bool:
        match = _CONDITION.match(condition)
        if not match:
            raise ItemStoreError(f"Unsupported condition expression: {condition!r}")
        exists = row is not None and self._resolve(match.group(2), names) in row.document
        return exists if match.group(1) == "attribute_exists" else not exists

    @staticmethod
    def _assign(document: Item, path: List[str], value: Any) -> None:
        target = document
        for part in path[:-1]:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]
        target[path[-1]] = value
