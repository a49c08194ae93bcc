"""
Dynamic finders: find_by_<attribute>(value).

The same parse_finder_name() check answers both "does the model respond
to this name" and "which attribute does it look up", so hasattr() and the
actual call can never disagree.
"""

import logging
from typing import Any, Callable, Optional, Type

from .registry import model_registry
from ..exceptions import UnknownAttributeError

logger = logging.getLogger(__name__)

FINDER_PREFIX = "find_by_"


def parse_finder_name(name: str) -> Optional[str]:
    """Return the attribute token of a find_by_<attribute> name, else None."""
    if name.startswith(FINDER_PREFIX) and len(name) > len(FINDER_PREFIX):
        return name[len(FINDER_PREFIX):]
    return None


def find_first_by(model: Type, attribute: str, value: Any) -> Optional[Any]:
    """First instance (in table order) whose attribute equals value, or None."""
    accessor = model_registry.info(model).accessors.get(attribute)
    if accessor is None:
        raise UnknownAttributeError(model.__name__, attribute)

    logger.debug(f"Finding first {model.__name__} by {attribute}={value!r}")
    for instance in model.all():
        if accessor.get(instance) == value:
            return instance
    return None


def bind_finder(model: Type, attribute: str) -> Callable[[Any], Optional[Any]]:
    """Build the callable returned for Model.find_by_<attribute>."""
    def finder(value):
        return find_first_by(model, attribute, value)

    finder.__name__ = f"{FINDER_PREFIX}{attribute}"
    finder.__qualname__ = f"{model.__name__}.{finder.__name__}"
    return finder
