from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic._internal._model_construction import ModelMetaclass

from .finders import parse_finder_name, bind_finder
from .registry import model_registry
from .mixins import AttributeMixin, QueryMixin, PersistenceMixin


class ModelConfig(ConfigDict, total=False):
    """Configuration for all model classes."""
    table_name: Optional[str]


class ModelMeta(ModelMetaclass):
    """Resolves find_by_<attribute> on model classes."""

    def __getattr__(cls, name: str) -> Any:
        attribute = parse_finder_name(name)
        if attribute is not None:
            return bind_finder(cls, attribute)
        return super().__getattr__(name)


class Model(AttributeMixin, QueryMixin, PersistenceMixin, BaseModel, metaclass=ModelMeta):
    """
    Base class for all record models.

    Subclasses declare their attributes as fields; the field list is the
    schema that accessors, reflection and persistence iterate.

    Example:
        class User(Model):
            id: Optional[int] = None
            name: Optional[str] = None
            age: Optional[int] = None

            @scope
            def senior(cls):
                return cls.where(age=lambda age: age >= 30)

        User.find_by_name("Alice")
        User(name="Zoe", age=22).save_or_raise()
    """
    model_config = ModelConfig(extra="forbid",
                               validate_assignment=False,
                               arbitrary_types_allowed=True)

    _new_record: bool = PrivateAttr(default=True)
    _destroyed: bool = PrivateAttr(default=False)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, /, **data: Any):
        if attributes:
            data = {**attributes, **data}
        super().__init__(**data)

    def model_post_init(self, context: Any, /) -> None:
        # A model built without an id has never been stored
        self._new_record = "id" not in self.model_fields_set

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        model_registry.register(cls)
