"""
PersistenceMixin: create/update/destroy lifecycle.

save() is the only place errors are caught: a failed create or update is
logged and reported as False. save_or_raise() turns that back into an
exception.
"""

import logging
from typing import Any, Mapping, Optional

from ...config import get_config
from ...exceptions import RecordNotSavedError, UnknownAttributeError
from ..registry import model_registry

logger = logging.getLogger(__name__)


class PersistenceMixin:
    """
    Persistence operations mixin.

    Lifecycle: new --save--> persisted --destroy--> destroyed.
    """

    def is_new_record(self) -> bool:
        return self._new_record

    def is_destroyed(self) -> bool:
        return self._destroyed

    def is_persisted(self) -> bool:
        return not self.is_new_record() and not self.is_destroyed()

    def save(self) -> bool:
        """Insert if new, otherwise overwrite the stored record. Never raises."""
        try:
            if self._new_record:
                self._create_record()
            else:
                self._update_record()
            return True
        except Exception as e:
            logger.error(f"Error saving record: {e}")
            return False

    def save_or_raise(self):
        """Save or raise RecordNotSavedError. Returns self for chaining."""
        if not self.save():
            raise RecordNotSavedError(f"Failed to save {type(self).__name__}")
        return self

    def update(self, attributes: Optional[Mapping[str, Any]] = None, **kwargs):
        """
        Assign attributes then save_or_raise().

        Keys that are not declared attributes are skipped unless the
        configuration disables ignore_unknown_attributes.
        """
        accessors = model_registry.info(type(self)).accessors
        changes = {**(attributes or {}), **kwargs}

        unknown = [key for key in changes if key not in accessors]
        if unknown:
            # Reject before assigning anything so the instance stays clean
            if not get_config().ignore_unknown_attributes:
                raise UnknownAttributeError(type(self).__name__, unknown[0])
            logger.debug(f"Ignoring unknown attributes {', '.join(unknown)} for {type(self).__name__}")

        for key, value in changes.items():
            accessor = accessors.get(key)
            if accessor is not None:
                accessor.set(self, value)

        return self.save_or_raise()

    def destroy(self):
        """Remove the stored record if persisted. Always returns self."""
        if self.is_persisted():
            db = self.database()
            db.delete(self.table_name(), self.id)
            self._destroyed = True
            logger.info(f"Destroyed {type(self).__name__} id={self.id}")
        return self

    def _create_record(self) -> None:
        db = self.database()
        table = self.table_name()

        new_id = db.next_id(table)
        record = self.record_attributes()
        record["id"] = new_id
        self.id = new_id
        db.insert(table, record)
        self._new_record = False
        logger.info(f"Created {type(self).__name__} id={new_id}")

    def _update_record(self) -> None:
        db = self.database()
        db.replace(self.table_name(), self.id, self.record_attributes())
        logger.info(f"Updated {type(self).__name__} id={self.id}")
