"""
Record - the (key, value) pair stored in the index.
"""

from dataclasses import dataclass

from avldb.models.exceptions import InvalidRecordError


@dataclass(frozen=True)
class Record:
    """
    A keyed record with an auxiliary integer value.

    The key orders the record inside the tree. The value is a payload that
    range queries also treat as an ordering key, which only yields complete
    results when key order and value order agree for the stored data.

    Attributes:
        key: Ordering key for tree placement.
        value: Integer payload, also used by value-range queries.
    """

    key: str
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise InvalidRecordError("key", self.key, "str")
        # bool is an int subclass but never a meaningful payload
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidRecordError("value", self.value, "int")

    def as_tuple(self) -> tuple[str, int]:
        return (self.key, self.value)
