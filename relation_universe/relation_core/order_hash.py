"""
Deterministic hashing of relation weights.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- relation_hash: hash64 of a RelationMatrix's row-major weights

No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any, NewType

from .types import RelationMatrix

# Hash type (64-bit from SHA-256)
Hash64 = NewType("Hash64", int)


def hash64(obj: Any) -> Hash64:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    - Canonical JSON serialization (sorted keys, no whitespace)
    - First 8 bytes of the digest, big-endian, unsigned

    Args:
        obj: Any JSON-serializable Python object

    Returns:
        64-bit integer hash (0 to 2^64-1)

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    hash_bytes = sha.digest()[:8]
    return Hash64(int.from_bytes(hash_bytes, byteorder="big", signed=False))


def relation_hash(matrix: RelationMatrix) -> Hash64:
    """
    Hash of a relation's order and weights.

    Floats are serialized with repr() (-0.0 folded into 0.0) so equal
    matrices always hash equal.
    """
    return hash64({
        "order": matrix.order,
        "rows": [[repr(v + 0.0) for v in row] for row in matrix.rows()],
    })
