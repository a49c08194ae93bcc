"""
AttributeMixin: attribute reflection and rendering.

Reflection iterates the declared schema, never arbitrary instance state,
so lifecycle flags cannot leak into attributes() or stored records.
"""

from typing import Any, Dict

from fastcore.xml import Div, Span


class AttributeMixin:
    """
    Attribute reflection mixin.

    Provides the attribute dump used for display and the full record
    dump used for persistence.
    """

    def attributes(self) -> Dict[str, Any]:
        """Every declared attribute that has been set, in declaration order."""
        fields_set = self.model_fields_set
        return {name: getattr(self, name) for name in type(self).model_fields if name in fields_set}

    def record_attributes(self) -> Dict[str, Any]:
        """Every declared attribute, unset ones as their default."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def __str__(self) -> str:
        pairs = ", ".join(f"{key}: {value}" for key, value in self.attributes().items())
        return f"#<{type(self).__name__} {pairs}>"

    def __ft__(self):
        """Render as a Div with one Span per set attribute."""
        name = type(self).__name__.lower()
        return Div(
            *[Span(f"{key}: {value}", cls=f"{name}-{key}") for key, value in self.attributes().items()],
            id=f"{name}-{getattr(self, 'id', None)}",
            cls="record",
        )
