"""
Data models for the record index.
"""

from avldb.models.exceptions import InvalidRecordError
from avldb.models.record import Record

__all__ = [
    "InvalidRecordError",
    "Record",
]
