"""
Database facade over the record index.
"""

from avldb.engine.database import IndexedDatabase

__all__ = ["IndexedDatabase"]
