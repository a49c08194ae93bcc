"""
QueryMixin: class-level query entry points.

Every entry point builds a fresh Query bound to the model type.
"""

from typing import Any, Callable, Mapping, Optional

from ...persistence import MemoryDatabase
from ..query import Query, QueryResult
from ..registry import model_registry
from ..finders import find_first_by


class QueryMixin:
    """
    Query operations mixin.

    Provides where/all/first/last/find plus scope registration on the
    model class, working against the configured record store.
    """

    # Store class, not instance
    _database_class = MemoryDatabase

    @classmethod
    def database(cls):
        """Get the record store backing this model."""
        return cls._database_class()

    @classmethod
    def table_name(cls) -> str:
        return model_registry.info(cls).table_name

    @classmethod
    def query(cls) -> Query:
        """An empty query over this model's table."""
        return Query(cls)

    @classmethod
    def where(cls, conditions: Optional[Mapping[str, Any]] = None, /, **kwargs) -> Query:
        return cls.query().where(conditions, **kwargs)

    @classmethod
    def all(cls) -> QueryResult:
        return cls.query().all()

    @classmethod
    def first(cls):
        return cls.query().first()

    @classmethod
    def last(cls):
        return cls.query().last()

    @classmethod
    def count(cls) -> int:
        return cls.query().count()

    @classmethod
    def find(cls, record_id: Any):
        """The instance with the given id, or None."""
        for instance in cls.all():
            if instance.id == record_id:
                return instance
        return None

    @classmethod
    def find_by(cls, conditions: Optional[Mapping[str, Any]] = None, /, **kwargs):
        """First instance matching the conditions, or None."""
        return cls.where(conditions, **kwargs).first()

    @classmethod
    def find_first_by(cls, attribute: str, value: Any):
        """Generic form of the dynamic find_by_<attribute> finders."""
        return find_first_by(cls, attribute, value)

    @classmethod
    def scope(cls, name: str, body: Callable[..., Any]) -> None:
        """
        Register a named scope. body is called as body(model, *args).

        Example:
            User.scope("age_between", lambda m, low, high: m.where(age=Range(low, high)))
            User.age_between(25, 30).all()
        """
        model_registry.add_scope(cls, name, body)
