"""
StarRecord Model Registry

One ModelInfo per model type: its table name, the accessor table built
from its declared fields, and its named scopes. Registration happens once,
from the model's class-creation hook.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple, Type

from .attributes import AttributeAccessor, build_accessors
from .scopes import ScopeMethod

logger = logging.getLogger(__name__)


def table_name_for(model: Type) -> str:
    """
    Configured table_name, otherwise the upper-cased plural class name (User -> USERS).

    model_config is inherited, so a subclass of a model with a table_name
    shares that table unless it configures its own.
    """
    config = getattr(model, "model_config", {}) or {}
    return config.get("table_name") or f"{model.__name__.upper()}S"


@dataclass
class ModelInfo:
    """Registration data for one model type"""
    model: Type
    table_name: str
    accessors: Dict[str, AttributeAccessor] = field(default_factory=dict)
    scopes: Dict[str, Callable[..., Any]] = field(default_factory=dict)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.accessors)


class ModelRegistry:
    """
    Registry for model types.

    Holds the per-type accessor and scope tables that the query mixin,
    the dynamic finders and the persistence mixin look up.
    """

    def __init__(self):
        self._models: Dict[Type, ModelInfo] = {}

    def register(self, model: Type) -> ModelInfo:
        """
        Register a model type, collecting its @scope functions.

        Registering a type again rebuilds its accessor table and keeps
        scopes added at runtime.

        Args:
            model: The Model subclass to register

        Returns:
            The model's registration data
        """
        previous = self._models.get(model)
        info = ModelInfo(
            model=model,
            table_name=table_name_for(model),
            accessors=build_accessors(model),
            scopes=dict(previous.scopes) if previous else {},
        )
        self._models[model] = info

        for attr_name, attr in list(vars(model).items()):
            scope_info = getattr(attr, '_scope_info', None)
            if scope_info is not None:
                if attr_name != scope_info.name:
                    delattr(model, attr_name)
                self.add_scope(model, scope_info.name, scope_info.body)

        logger.debug(f"Registered model {model.__name__} (table {info.table_name}, fields {', '.join(info.fields)})")
        return info

    def info(self, model: Type) -> ModelInfo:
        """Get registration data, registering the type on first use."""
        if model not in self._models:
            return self.register(model)
        return self._models[model]

    def is_registered(self, model: Type) -> bool:
        return model in self._models

    def unregister(self, model: Type) -> None:
        self._models.pop(model, None)

    def add_scope(self, model: Type, name: str, body: Callable[..., Any]) -> None:
        """
        Register a named scope on a model type. Last registration wins.

        Raises:
            ValueError: If the name collides with a declared attribute
        """
        info = self.info(model)
        if name in info.accessors:
            raise ValueError(f"Scope name '{name}' collides with attribute of {model.__name__}")

        if name in info.scopes:
            logger.debug(f"Overwriting scope {model.__name__}.{name}")
        info.scopes[name] = body
        setattr(model, name, ScopeMethod(name, self))

    def find_scope(self, model: Type, name: str) -> Callable[..., Any]:
        """Resolve a scope body through the model's MRO."""
        for klass in model.__mro__:
            info = self._models.get(klass)
            if info is not None and name in info.scopes:
                return info.scopes[name]
        raise AttributeError(f"{model.__name__} has no scope '{name}'")


# Global model registry instance
model_registry = ModelRegistry()
