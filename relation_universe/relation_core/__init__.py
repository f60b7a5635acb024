"""
relation_core: Core primitives for fuzzy relation closure.

Provides:
- types: RelationMatrix, the fixed-order square weight container
- errors: ClosureError taxonomy (dimension mismatch, index, input parse)
- combinators: compose (⊙), disjoin (∨), union_max, crisp_derivative
- order_hash: Deterministic hashing (SHA-256) of relation weights
"""

from .errors import (
    ClosureError,
    DimensionMismatchError,
    InputParseError,
    RelationIndexError,
)
from .types import RelationMatrix
from .combinators import compose, crisp_derivative, disjoin, union_max

__all__ = [
    "ClosureError",
    "DimensionMismatchError",
    "InputParseError",
    "RelationIndexError",
    "RelationMatrix",
    "compose",
    "crisp_derivative",
    "disjoin",
    "union_max",
]
