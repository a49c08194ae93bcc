"""
StarRecord - In-memory ActiveRecord-style models

Declare a model as a set of fields, query it with chainable where()
filters, named scopes and find_by_<attribute> finders, and move it
through a create/update/destroy lifecycle against an in-memory store.
"""

from .core import (
    Model, ModelConfig, Query, QueryResult, Range, Condition, ConditionKind,
    scope, model_registry, table_name_for,
)
from .persistence import RecordStoreBackend, MemoryDatabase, get_database
from .exceptions import (
    RecordError, TableNotFoundError, RecordNotFoundError,
    RecordNotSavedError, UnknownAttributeError,
)
from .config import RecordConfig, LoggingConfig, get_config, set_config, configure_logging
from .seeds import seed_users

__all__ = [
    # Core model components
    'Model',
    'ModelConfig',
    'Query',
    'QueryResult',
    'Range',
    'Condition',
    'ConditionKind',
    'scope',
    'model_registry',
    'table_name_for',

    # Record store
    'RecordStoreBackend',
    'MemoryDatabase',
    'get_database',
    'seed_users',

    # Errors
    'RecordError',
    'TableNotFoundError',
    'RecordNotFoundError',
    'RecordNotSavedError',
    'UnknownAttributeError',

    # Configuration
    'RecordConfig',
    'LoggingConfig',
    'get_config',
    'set_config',
    'configure_logging',
]
