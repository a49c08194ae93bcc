"""
StarRecord Persistence Layer - Memory Backend

In-memory record store. Tables are plain lists of dicts and live as long
as the process does.
"""

import logging
from typing import Any, Dict, Iterable, List

from .base import RecordStoreBackend, Record
from ..exceptions import TableNotFoundError, RecordNotFoundError

logger = logging.getLogger(__name__)


class MemoryDatabase(RecordStoreBackend):
    """
    In-memory record store implementation (Singleton).

    Every model shares the same instance, so a table created once is
    visible to all models that map onto it. Data is lost when the
    process exits.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        """Implement singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize memory record store (only once)."""
        if not self._initialized:
            self._tables: Dict[str, List[Record]] = {}
            MemoryDatabase._initialized = True

    def table(self, name: str) -> List[Record]:
        """Return the live list backing a table."""
        try:
            return self._tables[name]
        except KeyError:
            raise TableNotFoundError(name) from None

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def table_names(self) -> List[str]:
        return list(self._tables)

    def create_table(self, name: str, records: Iterable[Record] = ()) -> List[Record]:
        self._tables[name] = [dict(record) for record in records]
        logger.debug(f"Created table {name} with {len(self._tables[name])} records")
        return self._tables[name]

    def drop_table(self, name: str) -> bool:
        existed = self._tables.pop(name, None) is not None
        if existed:
            logger.debug(f"Dropped table {name}")
        return existed

    def insert(self, name: str, record: Record) -> Record:
        stored = dict(record)
        self.table(name).append(stored)
        return stored

    def replace(self, name: str, record_id: Any, record: Record) -> Record:
        table = self.table(name)
        for index, existing in enumerate(table):
            if existing.get("id") == record_id:
                table[index] = dict(record)
                return table[index]
        raise RecordNotFoundError(name, record_id)

    def delete(self, name: str, record_id: Any) -> int:
        table = self.table(name)
        before = len(table)
        # Slice assignment keeps the list identity for callers holding the table
        table[:] = [record for record in table if record.get("id") != record_id]
        return before - len(table)

    def next_id(self, name: str) -> int:
        ids = [record["id"] for record in self.table(name) if record.get("id") is not None]
        return max(ids) + 1 if ids else 1

    def reset(self) -> None:
        self._tables.clear()


# Convenience function to get singleton instance
def get_database() -> MemoryDatabase:
    """Get the singleton in-memory record store."""
    return MemoryDatabase()
