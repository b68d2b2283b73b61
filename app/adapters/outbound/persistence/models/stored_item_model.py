# app/adapters/outbound/persistence/models/stored_item_model.py

"""
Document model backing the item store.

Every logical table of the item store (Client, Password) shares this
physical table; a row holds one item as a JSON document.
"""

from sqlalchemy import Column, String, JSON, DateTime, func
from app.adapters.outbound.persistence.models.base_model import Base


class StoredItem(Base):
    """
    One item of a logical table.

    Attributes:
        table_name: Logical table the item belongs to
        item_key: Value of the table's key attribute
        document: The whole item, as written by the repositories
        created_at: Date and time the row was inserted
        updated_at: Date and time of the last write
    """
    __tablename__ = "stored_items"

    table_name = Column(String(64), primary_key=True)
    item_key = Column(String(255), primary_key=True)
    document = Column(JSON, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<StoredItem(table={self.table_name}, key={self.item_key})>"
