"""
Fuzzy (max-min) transitive closure.

Goal: smallest fuzzy relation G ⊇ F with G[i][j] ≥ max_k min(G[i][k], G[k][j]).

Two power sequences are tracked side by side:
1. Crisp reachability powers of the derivative C (F > 0 → 1): which (i, j)
   pairs are reachable in exactly h hops, independent of weight
2. Fuzzy powers of F: strength of the best h-hop path

Fuzzy strength is only computed where the crisp power marks (i, j) as
reachable at that hop count; every other position of the fuzzy power is 0.

Algorithm:
1. relation = crisp_derivative(F)
2. result = F, next_relation_power = relation, next_fuzzy_power = F
3. For iteration = 1 .. n-2:
   a. next_relation_power = next_relation_power ⊙ relation
   b. next_fuzzy_power = fuzzy_power_step(next_fuzzy_power, F, next_relation_power)
   c. result = union_max(result, next_fuzzy_power)
4. Return result

Numeric semantics: exact max/min, no epsilon. Weights are not range-checked
here; out-of-range input propagates unchanged.
"""

import logging
from typing import Tuple

import numpy as np

from relation_core.combinators import check_same_order, compose, crisp_derivative, union_max
from relation_core.order_hash import relation_hash
from relation_core.types import RelationMatrix
from relation_closure.receipt import ClosureReceipt

logger = logging.getLogger(__name__)


# =============================================================================
# Fuzzy Power Step
# =============================================================================


def fuzzy_power_step(
    fuzzy_power: RelationMatrix,
    fuzzy_relation: RelationMatrix,
    relation_power: RelationMatrix,
) -> RelationMatrix:
    """
    One max-min composition step, restricted to crisp-reachable positions.

    For each (i, j) with relation_power[i][j] == 1:
        result[i][j] = max(0, max_k min(fuzzy_power[i][k], fuzzy_relation[k][j]))
    All other positions are 0.

    Args:
        fuzzy_power: Fuzzy power from the previous hop level
        fuzzy_relation: Base fuzzy relation F
        relation_power: Crisp reachability power at the new hop level (mask)

    Returns:
        New fuzzy power matrix

    Raises:
        DimensionMismatchError: If the three orders differ
    """
    check_same_order("compose", fuzzy_power, fuzzy_relation)
    check_same_order("mask", fuzzy_relation, relation_power)

    prev = fuzzy_power.to_array()
    base = fuzzy_relation.to_array()
    mask = relation_power.to_array() == 1

    # Fold one intermediate node k at a time into an n×n accumulator starting at 0
    order = fuzzy_relation.order
    strongest = np.zeros((order, order), dtype=np.float64)
    for k in range(order):
        np.maximum(strongest, np.minimum(prev[:, k:k + 1], base[k:k + 1, :]), out=strongest)

    return RelationMatrix.from_array(np.where(mask, strongest, 0.0))


# =============================================================================
# Main Entry Point
# =============================================================================


def compute_fuzzy_closure(fuzzy_relation: RelationMatrix) -> Tuple[RelationMatrix, ClosureReceipt]:
    """
    Compute the max-min transitive closure of a fuzzy relation.

    Args:
        fuzzy_relation: Fuzzy relation F of order n (not modified)

    Returns:
        (closure, receipt) where closure ⊇ F elementwise

    Acceptance:
        - Exactly max(n - 2, 0) iterations (n ≤ 2 returns F unchanged)
        - Fuzzy power is 0 wherever the crisp power is not 1
        - Deterministic (same F → same closure and receipt)

    Examples:
        >>> F = RelationMatrix.from_rows([[0, 0.5, 0], [0, 0, 0.8], [0, 0, 0]])
        >>> compute_fuzzy_closure(F)[0].to_rows()
        [[0.0, 0.5, 0.5], [0.0, 0.0, 0.8], [0.0, 0.0, 0.0]]
    """
    order = fuzzy_relation.order
    relation = crisp_derivative(fuzzy_relation)

    result = fuzzy_relation.copy()
    next_relation_power = relation
    next_fuzzy_power = fuzzy_relation.copy()

    receipt = ClosureReceipt(kind="fuzzy", order=order)
    receipt.reachable_per_hop.append(_count_reachable(next_relation_power))

    for iteration in range(1, order - 1):
        next_relation_power = compose(next_relation_power, relation)
        next_fuzzy_power = fuzzy_power_step(next_fuzzy_power, fuzzy_relation, next_relation_power)
        result = union_max(result, next_fuzzy_power)

        reachable = _count_reachable(next_relation_power)
        receipt.reachable_per_hop.append(reachable)
        receipt.iterations += 1
        logger.debug(
            f"fuzzy closure: iteration {iteration}/{order - 2}, "
            f"{reachable} positions reachable in {iteration + 1} hops"
        )

    receipt.result_hash = relation_hash(result)
    return result, receipt


def fuzzy_transitive_closure(fuzzy_relation: RelationMatrix) -> RelationMatrix:
    """Max-min transitive closure of F (see compute_fuzzy_closure)."""
    result, _ = compute_fuzzy_closure(fuzzy_relation)
    return result


def _count_reachable(relation_power: RelationMatrix) -> int:
    return int(np.count_nonzero(relation_power.to_array() == 1))
