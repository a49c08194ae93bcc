"""
StarRecord Persistence Layer - Base Classes

This module provides the abstract interface for record store backends.
A record store keeps one ordered list of records per table name.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

Record = Dict[str, Any]


class RecordStoreBackend(ABC):
    """
    Abstract base class for record store backends.

    Implementations keep tables as ordered sequences of records and
    address them by name. Store order is insertion order.
    """

    @abstractmethod
    def table(self, name: str) -> List[Record]:
        """
        Return the ordered records of a table.

        Args:
            name: Table name

        Returns:
            The table's records in store order

        Raises:
            TableNotFoundError: If no table has that name
        """
        pass

    @abstractmethod
    def has_table(self, name: str) -> bool:
        """Check if a table exists."""
        pass

    @abstractmethod
    def create_table(self, name: str, records: Iterable[Record] = ()) -> List[Record]:
        """
        Create (or replace) a table, optionally seeded with records.

        Args:
            name: Table name
            records: Initial records, copied into the table

        Returns:
            The new table
        """
        pass

    @abstractmethod
    def drop_table(self, name: str) -> bool:
        """Drop a table. Returns True if it existed."""
        pass

    @abstractmethod
    def insert(self, name: str, record: Record) -> Record:
        """Append a record to the end of a table."""
        pass

    @abstractmethod
    def replace(self, name: str, record_id: Any, record: Record) -> Record:
        """
        Overwrite the record with the given id.

        Raises:
            RecordNotFoundError: If no record has that id
        """
        pass

    @abstractmethod
    def delete(self, name: str, record_id: Any) -> int:
        """
        Remove every record with the given id.

        Returns:
            Number of records removed
        """
        pass

    @abstractmethod
    def next_id(self, name: str) -> int:
        """Return max(existing ids) + 1, or 1 for an empty table."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Drop every table."""
        pass
