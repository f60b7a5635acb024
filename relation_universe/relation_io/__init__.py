"""
relation_io: Text boundary of the closure tool.

Provides:
- text: RelationReader, read_relation, format_relation, write_relation
- logs: setup_logger (stderr + optional file)
- cli: fuzzy-closure command entry point
"""

from .text import FIELD_WIDTH, RelationReader, format_relation, read_relation, write_relation

__all__ = [
    "FIELD_WIDTH",
    "RelationReader",
    "format_relation",
    "read_relation",
    "write_relation",
]
