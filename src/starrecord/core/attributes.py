"""
Attribute accessors generated from a model's declared fields.

Each declared field gets one AttributeAccessor. The accessor table is
built once when the model is registered and is what update() and the
dynamic finders consult, instead of resolving names at call time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type


@dataclass(frozen=True)
class AttributeAccessor:
    """Getter/setter pair for one declared attribute."""
    name: str

    def get(self, instance: Any) -> Any:
        # Unset attributes read as their field default (None for optional fields)
        return getattr(instance, self.name)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)


def attribute_names(model: Type) -> Tuple[str, ...]:
    """Declared attribute names of a model, in declaration order."""
    return tuple(model.model_fields)


def has_attribute(model: Type, name: str) -> bool:
    return name in model.model_fields


def build_accessors(model: Type) -> Dict[str, AttributeAccessor]:
    """Build the name -> accessor table for every declared attribute."""
    return {name: AttributeAccessor(name) for name in attribute_names(model)}
