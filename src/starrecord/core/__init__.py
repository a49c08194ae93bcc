"""
StarRecord Core Module

Models, queries, scopes and dynamic finders over the record store.
"""

from .model import Model, ModelConfig
from .query import Query, QueryResult, Range, Condition, ConditionKind
from .scopes import scope
from .registry import ModelRegistry, ModelInfo, model_registry, table_name_for
from .attributes import AttributeAccessor, attribute_names, has_attribute
from .finders import parse_finder_name

__all__ = [
    "Model",
    "ModelConfig",
    "Query",
    "QueryResult",
    "Range",
    "Condition",
    "ConditionKind",
    "scope",
    "ModelRegistry",
    "ModelInfo",
    "model_registry",
    "table_name_for",
    "AttributeAccessor",
    "attribute_names",
    "has_attribute",
    "parse_finder_name",
]
