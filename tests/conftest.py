"""
Shared fixtures for the StarRecord test suite.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

from starrecord import get_database, seed_users, set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the environment-derived configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def db():
    """The singleton store with a fresh copy of the five seed users."""
    database = get_database()
    database.reset()
    seed_users(database)
    yield database
    database.reset()
