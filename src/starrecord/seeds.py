"""
Seed data for the USERS table.
"""

from typing import List

from .persistence import RecordStoreBackend, Record

USERS: List[Record] = [
    {"id": 1, "name": "Alice", "age": 30, "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "age": 25, "email": "bob@example.com"},
    {"id": 3, "name": "Charlie", "age": 35, "email": "charlie@example.com"},
    {"id": 4, "name": "David", "age": 40, "email": "david@example.com"},
    {"id": 5, "name": "Eve", "age": 28, "email": "eve@example.com"},
]

USERS_EXTENDED: List[Record] = USERS + [
    {"id": 6, "name": "Frank", "age": 32, "email": "frank@example.com"},
    {"id": 7, "name": "Grace", "age": 29, "email": "grace@example.com"},
    {"id": 8, "name": "Hank", "age": 31, "email": "hank@example.com"},
    {"id": 9, "name": "Ivy", "age": 27, "email": "ivy@example.com"},
    {"id": 10, "name": "Jack", "age": 33, "email": "jack@example.com"},
    {"id": 11, "name": "Kate", "age": 26, "email": "kate@example.com"},
    {"id": 12, "name": "Liam", "age": 34, "email": "liam@example.com"},
    {"id": 13, "name": "Mia", "age": 27, "email": "mia@example.com"},
    {"id": 14, "name": "Noah", "age": 30, "email": "noah@example.com"},
    {"id": 15, "name": "Olivia", "age": 28, "email": "olivia@example.com"},
    {"id": 16, "name": "Paul", "age": 31, "email": "paul@example.com"},
    {"id": 17, "name": "Quinn", "age": 29, "email": "quinn@example.com"},
    {"id": 18, "name": "Ryan", "age": 30, "email": "ryan@example.com"},
    {"id": 19, "name": "Sarah", "age": 25, "email": "sarah@example.com"},
    {"id": 20, "name": "Tom", "age": 35, "email": "tom@example.com"},
    {"id": 21, "name": "Uma", "age": 28, "email": "uma@example.com"},
    {"id": 22, "name": "Violet", "age": 32, "email": "violet@example.com"},
    {"id": 23, "name": "William", "age": 29, "email": "william@example.com"},
    {"id": 24, "name": "Xavier", "age": 31, "email": "xavier@example.com"},
    {"id": 25, "name": "Yara", "age": 29, "email": "yara@example.com"},
    {"id": 26, "name": "Zane", "age": 30, "email": "zane@example.com"},
]


def seed_users(database: RecordStoreBackend, extended: bool = False) -> List[Record]:
    """(Re)create the USERS table from a fresh copy of the seed records."""
    return database.create_table("USERS", USERS_EXTENDED if extended else USERS)
