"""
Crisp (Boolean) transitive closure, Warshall-style power accumulation.

Algorithm:
1. result = R, next_power = R
2. For iteration = 1 .. n-2:
   next_power = next_power ⊙ R     (one more hop)
   result = result ∨ next_power    (accumulate)
3. result[i][j] = 1 iff j is reachable from i by a path of 1..n-1 edges

The n-1 hop bound is kept exactly as is. For n ≤ 2 the loop does not run
and R is returned unchanged (as a copy).
"""

import logging
from typing import Tuple

import numpy as np

from relation_core.combinators import compose, disjoin
from relation_core.order_hash import relation_hash
from relation_core.types import RelationMatrix
from relation_closure.receipt import ClosureReceipt

logger = logging.getLogger(__name__)


def compute_crisp_closure(relation: RelationMatrix) -> Tuple[RelationMatrix, ClosureReceipt]:
    """
    Compute the crisp transitive closure of a 0/1 relation.

    Args:
        relation: 0/1 relation matrix R of order n (not modified)

    Returns:
        (closure, receipt) where closure is a new 0/1 matrix containing R

    Acceptance:
        - closure ⊇ R elementwise
        - Exactly max(n - 2, 0) iterations
        - Deterministic (same R → same closure and receipt)
    """
    order = relation.order
    result = relation.copy()
    next_power = relation.copy()

    receipt = ClosureReceipt(kind="crisp", order=order)
    receipt.reachable_per_hop.append(_count_ones(next_power))

    for iteration in range(1, order - 1):
        next_power = compose(next_power, relation)
        result = disjoin(result, next_power)

        reachable = _count_ones(next_power)
        receipt.reachable_per_hop.append(reachable)
        receipt.iterations += 1
        logger.debug(
            f"crisp closure: iteration {iteration}/{order - 2}, "
            f"{reachable} pairs reachable in {iteration + 1} hops"
        )

    receipt.result_hash = relation_hash(result)
    return result, receipt


def crisp_transitive_closure(relation: RelationMatrix) -> RelationMatrix:
    """
    Crisp transitive closure of R (see compute_crisp_closure).

    Examples:
        Chain 0→1→2:
            [[0,1,0],[0,0,1],[0,0,0]] → [[0,1,1],[0,0,1],[0,0,0]]
    """
    result, _ = compute_crisp_closure(relation)
    return result


def _count_ones(matrix: RelationMatrix) -> int:
    return int(np.count_nonzero(matrix.to_array() == 1))
