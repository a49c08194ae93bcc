"""
Query Builder

Immutable, chainable filters over a model's table. Conditions are kept
per field and only evaluated when the query is materialized with all(),
first(), last() or count().

Every materialization rescans the whole table and rebuilds every match;
first() and last() do not push a limit down into the scan.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from ..persistence import Record
from .registry import model_registry

logger = logging.getLogger(__name__)

ModelType = TypeVar('ModelType')


class ConditionKind(Enum):
    """How a condition value is matched against a record value"""
    RANGE = "range"
    PREDICATE = "predicate"
    EQUALS = "equals"


@dataclass(frozen=True)
class Range:
    """Inclusive range condition: low <= value <= high."""
    low: Any
    high: Any

    def __contains__(self, value: Any) -> bool:
        try:
            return self.low <= value <= self.high
        except TypeError:
            return False


@dataclass(frozen=True)
class Condition:
    """A single field condition"""
    kind: ConditionKind
    value: Any

    @classmethod
    def from_value(cls, value: Any) -> 'Condition':
        """Classify a raw condition value."""
        if isinstance(value, Condition):
            return value
        if isinstance(value, (Range, range)):
            return cls(ConditionKind.RANGE, value)
        if callable(value) and not isinstance(value, type):
            return cls(ConditionKind.PREDICATE, value)
        return cls(ConditionKind.EQUALS, value)

    def matches(self, record_value: Any) -> bool:
        if self.kind is ConditionKind.RANGE:
            return record_value in self.value
        if self.kind is ConditionKind.PREDICATE:
            return bool(self.value(record_value))
        return record_value == self.value


@dataclass
class QueryResult(Generic[ModelType]):
    """Materialized query result, in table order"""
    entities: List[ModelType]

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def __getitem__(self, index):
        return self.entities[index]

    def first(self) -> Optional[ModelType]:
        """Get first entity or None"""
        return self.entities[0] if self.entities else None

    def last(self) -> Optional[ModelType]:
        """Get last entity or None"""
        return self.entities[-1] if self.entities else None


@dataclass(frozen=True)
class Query(Generic[ModelType]):
    """
    Chainable set of filter conditions bound to a model type.

    Conditions are ANDed. A value may be a Range (or a builtin range),
    a one-argument predicate, or anything else for exact equality.

    Example:
        User.where(age=Range(25, 30)).where(name=lambda n: n.startswith("A")).all()
    """
    model: Type[ModelType]
    conditions: Mapping[str, Condition] = field(default_factory=dict)

    def __post_init__(self):
        frozen = {key: Condition.from_value(value) for key, value in self.conditions.items()}
        object.__setattr__(self, "conditions", MappingProxyType(frozen))

    def where(self, conditions: Optional[Mapping[str, Any]] = None, /, **kwargs) -> 'Query[ModelType]':
        """Return a new query with the given conditions merged in. Later keys win."""
        merged: Dict[str, Any] = dict(self.conditions)
        merged.update(conditions or {})
        merged.update(kwargs)
        return Query(self.model, merged)

    @property
    def table_name(self) -> str:
        return model_registry.info(self.model).table_name

    def matches(self, record: Record) -> bool:
        return all(condition.matches(record.get(key)) for key, condition in self.conditions.items())

    def all(self) -> QueryResult[ModelType]:
        """Scan the table and wrap every matching record as a model instance."""
        records = self.model.database().table(self.table_name)
        if self.conditions:
            matched = [record for record in records if self.matches(record)]
        else:
            matched = list(records)
        logger.debug(f"Scanned {self.table_name}: {len(matched)} of {len(records)} records matched")
        return QueryResult([self.model(**record) for record in matched])

    def first(self) -> Optional[ModelType]:
        return self.all().first()

    def last(self) -> Optional[ModelType]:
        return self.all().last()

    def count(self) -> int:
        return len(self.all())

    def __iter__(self):
        return iter(self.all())


__all__ = ["ConditionKind", "Range", "Condition", "QueryResult", "Query"]
