"""
Pure matrix combinators for closure computation.

Provides:
- compose: Boolean composition ⊙ (OR-of-ANDs over the Boolean semiring)
- disjoin: Elementwise Boolean OR ∨ (exact == 1 test on both operands)
- union_max: Elementwise maximum over real weights
- crisp_derivative: 0/1 reachability skeleton of a fuzzy relation

Every combinator:
- Requires equal order on both operands (DimensionMismatchError otherwise)
- Never mutates its operands
- Returns a freshly allocated RelationMatrix of the same order
"""

import numpy as np

from .errors import DimensionMismatchError
from .types import RelationMatrix


def check_same_order(operation: str, left: RelationMatrix, right: RelationMatrix) -> int:
    if left.order != right.order:
        raise DimensionMismatchError(operation, left.order, right.order)
    return left.order


# =============================================================================
# Boolean Composition (⊙)
# =============================================================================


def compose(left: RelationMatrix, right: RelationMatrix) -> RelationMatrix:
    """
    Boolean composition: advance crisp reachability by one hop.

    result[i][j] = 1 if ∃k: left[i][k] > 0 and right[k][j] > 0, else 0

    Args:
        left: Left operand (e.g. current reachability power)
        right: Right operand (e.g. base relation)

    Returns:
        0/1 RelationMatrix of the same order

    Raises:
        DimensionMismatchError: If orders differ

    Examples:
        Chain 0→1→2 composed with itself gives the 2-hop pair 0→2 only.
    """
    check_same_order("multiply", left, right)

    # Count witnesses k per (i, j); any witness makes the pair reachable
    left_hits = (left.to_array() > 0).astype(np.int64)
    right_hits = (right.to_array() > 0).astype(np.int64)
    witnesses = left_hits @ right_hits

    return RelationMatrix.from_array((witnesses > 0).astype(np.float64))


# =============================================================================
# Disjunction (∨)
# =============================================================================


def disjoin(left: RelationMatrix, right: RelationMatrix) -> RelationMatrix:
    """
    Elementwise Boolean OR: accumulate reachability across path lengths.

    result[i][j] = 1 if left[i][j] == 1 or right[i][j] == 1, else 0

    Only exact 1.0 entries count; any other weight is treated as false.

    Raises:
        DimensionMismatchError: If orders differ
    """
    check_same_order("find disjunction of", left, right)

    either = (left.to_array() == 1) | (right.to_array() == 1)
    return RelationMatrix.from_array(either.astype(np.float64))


# =============================================================================
# Union (max)
# =============================================================================


def union_max(left: RelationMatrix, right: RelationMatrix) -> RelationMatrix:
    """
    Elementwise maximum: keep the strongest path found so far.

    result[i][j] = max(left[i][j], right[i][j])

    Raises:
        DimensionMismatchError: If orders differ
    """
    check_same_order("unionize", left, right)

    return RelationMatrix.from_array(np.maximum(left.to_array(), right.to_array()))


# =============================================================================
# Crisp Derivative
# =============================================================================


def crisp_derivative(fuzzy_relation: RelationMatrix) -> RelationMatrix:
    """
    0/1 skeleton of a fuzzy relation: C[i][j] = 1 if R[i][j] > 0 else 0.

    Marks which positions are reachable in one hop, regardless of strength.
    """
    return RelationMatrix.from_array((fuzzy_relation.to_array() > 0).astype(np.float64))
