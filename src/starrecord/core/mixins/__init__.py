"""
Core mixins for model functionality.

These mixins provide reusable functionality that is mixed into the
pydantic-based Model class.
"""

from .attribute_mixin import AttributeMixin
from .query_mixin import QueryMixin
from .persistence_mixin import PersistenceMixin

__all__ = ["AttributeMixin", "QueryMixin", "PersistenceMixin"]
