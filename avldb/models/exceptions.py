"""
Custom exceptions for the record index.
"""

from typing import Any


class InvalidRecordError(ValueError):
    """
    Raised when a Record is built from a key or value of the wrong type.

    This is a caller contract violation and is never recovered internally.
    """

    def __init__(self, field: str, value: Any, expected: str):
        """
        Initialize the error.

        Args:
            field: Name of the offending field ("key" or "value").
            value: The rejected input.
            expected: Human-readable description of the accepted type.
        """
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid record {field}: expected {expected}, "
            f"got {type(value).__name__} {value!r}"
        )
