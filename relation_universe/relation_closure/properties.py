"""
Closure property checks.

Provides:
- transitivity_violations: (i, k, j) triples breaking max-min transitivity
- is_transitive: G[i][j] ≥ min(G[i][k], G[k][j]) for all i, j, k
- is_symmetric: R[i][j] == R[j][i] for all i, j
- dominates: upper[i][j] ≥ lower[i][j] for all i, j

On 0/1 matrices max-min transitivity is exactly crisp transitivity
(C[i][k] = C[k][j] = 1 ⇒ C[i][j] = 1), so one check serves both.
All comparisons are exact.
"""

from typing import Iterator, List, Tuple

import numpy as np

from relation_core.combinators import check_same_order
from relation_core.types import RelationMatrix

Triple = Tuple[int, int, int]


def _iter_violations(weights: np.ndarray) -> Iterator[Triple]:
    # One source row i at a time: through[k, j] = min(weights[i][k], weights[k][j])
    for i in range(weights.shape[0]):
        through = np.minimum(weights[i][:, np.newaxis], weights)
        broken = through > weights[i][np.newaxis, :]
        for k, j in np.argwhere(broken):
            yield (i, int(k), int(j))


def transitivity_violations(matrix: RelationMatrix) -> List[Triple]:
    """
    List every (i, k, j) with matrix[i][j] < min(matrix[i][k], matrix[k][j]).

    Triples are returned in row-major (i, k, j) order.

    Examples:
        3-cycle 0→1→2→0 after the n-1 hop closure still has a zero diagonal,
        so (0, 1, 0) is reported: C[0][1] = C[1][0] = 1 but C[0][0] = 0.
    """
    return list(_iter_violations(matrix.to_array()))


def is_transitive(matrix: RelationMatrix) -> bool:
    """True if the matrix satisfies max-min (equivalently crisp) transitivity."""
    return next(_iter_violations(matrix.to_array()), None) is None


def is_symmetric(matrix: RelationMatrix) -> bool:
    weights = matrix.to_array()
    return bool(np.array_equal(weights, weights.T))


def dominates(upper: RelationMatrix, lower: RelationMatrix) -> bool:
    """
    True if upper ⊇ lower elementwise.

    Raises:
        DimensionMismatchError: If orders differ
    """
    check_same_order("compare", upper, lower)
    return bool(np.all(upper.to_array() >= lower.to_array()))
