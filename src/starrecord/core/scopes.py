"""
Named scopes.

A scope is a named, reusable query fragment attached to a model type.
The @scope decorator only stores metadata on the function; the registry
collects marked functions when the model class is created and replaces
them with a ScopeMethod descriptor.

    class User(Model):
        age: Optional[int] = None

        @scope
        def senior(cls):
            return cls.where(age=lambda age: age >= 30)

    User.senior().all()
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .registry import ModelRegistry


@dataclass
class ScopeInfo:
    """Metadata about a scope function stored by the @scope decorator."""
    name: str
    body: Callable[..., Any]


def scope(fn: Optional[Callable] = None, *, name: Optional[str] = None):
    """
    Mark a function in a model class body as a named scope.

    The function receives the model type as its first argument followed
    by the call's arguments, and conventionally returns a Query.

    Args:
        fn: Function being decorated (when used without parentheses)
        name: Scope name, defaults to the function name
    """
    def decorator(func: Callable) -> Callable:
        func._scope_info = ScopeInfo(name=name or func.__name__, body=func)
        return func

    if fn is not None:
        return decorator(fn)
    return decorator


class ScopeMethod:
    """Class-level callable for a registered scope.

    The body is looked up in the registry on every access, so
    re-registering a scope under the same name replaces it.
    """

    def __init__(self, name: str, registry: 'ModelRegistry'):
        self.name = name
        self.registry = registry

    def __get__(self, instance, owner):
        model = owner if instance is None else type(instance)
        body = self.registry.find_scope(model, self.name)

        @functools.wraps(body)
        def bound(*args, **kwargs):
            return body(model, *args, **kwargs)

        return bound

    def __repr__(self) -> str:
        return f"ScopeMethod({self.name!r})"
