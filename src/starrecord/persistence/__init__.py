"""
StarRecord Persistence Module

Record store backends. The in-memory store stands in for a database:
one ordered list of records per table.
"""

from .base import RecordStoreBackend, Record
from .memory import MemoryDatabase, get_database

__all__ = [
    "RecordStoreBackend",
    "Record",
    "MemoryDatabase",
    "get_database",
]
