"""
StarRecord Exceptions

Error hierarchy shared by the record store and the model layer.
"""


class RecordError(Exception):
    """Base exception for record store and model errors"""
    pass


class TableNotFoundError(RecordError):
    """Raised when a model has no backing table in the record store"""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"Table {table_name} not found")


class RecordNotFoundError(RecordError):
    """Raised when an update targets an id that is not in the table"""

    def __init__(self, table_name: str, record_id):
        self.table_name = table_name
        self.record_id = record_id
        super().__init__(f"Record with id {record_id} not found")


class RecordNotSavedError(RecordError):
    """Raised by save_or_raise() when save() reports failure"""
    pass


class UnknownAttributeError(RecordError, AttributeError):
    """Raised when an attribute name is not part of a model's schema"""

    def __init__(self, model_name: str, attribute: str):
        self.model_name = model_name
        self.attribute = attribute
        super().__init__(f"{model_name} has no attribute '{attribute}'")


__all__ = [
    "RecordError",
    "TableNotFoundError",
    "RecordNotFoundError",
    "RecordNotSavedError",
    "UnknownAttributeError",
]
