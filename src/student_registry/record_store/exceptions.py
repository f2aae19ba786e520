"""Custom exceptions for Record Store."""


class RecordStoreError(Exception):
    """Base exception for Record Store errors."""


class RecordNotFoundError(RecordStoreError):
    """Student record with given key does not exist."""


class DuplicateKeyError(RecordStoreError):
    """A unique column already holds the given value.

    Attributes:
        column: Name of the violated column ("email" or "roll_number").
    """

    def __init__(self, column: str, message: str) -> None:
        super().__init__(message)
        self.column = column
