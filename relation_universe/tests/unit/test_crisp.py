"""
Unit tests for relation_closure/crisp.py

- Known answers (chain, 3-cycle, n ≤ 2 boundaries)
- Extensive / idempotent / transitive on DAGs and reflexive relations
- Symmetry preservation
- Agreement with a Floyd-Warshall reference where paths ≤ n-1 hops suffice
- Receipt contents
"""

import numpy as np
import pytest

from relation_core.types import RelationMatrix
from relation_closure.crisp import compute_crisp_closure, crisp_transitive_closure
from relation_closure.properties import dominates, is_symmetric, is_transitive


# =============================================================================
# Helpers
# =============================================================================


def warshall_reference(rows) -> np.ndarray:
    """Textbook Warshall closure (no hop bound)."""
    reach = np.array(rows, dtype=bool)
    n = reach.shape[0]
    for k in range(n):
        reach = reach | (reach[:, k:k + 1] & reach[k:k + 1, :])
    return reach.astype(np.float64)


def random_dag(n: int, seed: int, density: float = 0.4) -> RelationMatrix:
    rng = np.random.default_rng(seed)
    edges = np.triu(rng.random((n, n)) < density, k=1)
    return RelationMatrix.from_array(edges.astype(np.float64))


def random_reflexive(n: int, seed: int, density: float = 0.3) -> RelationMatrix:
    rng = np.random.default_rng(seed)
    edges = rng.random((n, n)) < density
    np.fill_diagonal(edges, True)
    return RelationMatrix.from_array(edges.astype(np.float64))


def random_symmetric(n: int, seed: int, density: float = 0.3) -> RelationMatrix:
    rng = np.random.default_rng(seed)
    upper = np.triu(rng.random((n, n)) < density, k=1)
    return RelationMatrix.from_array((upper | upper.T).astype(np.float64))


SEEDS = [0, 1, 2, 3, 7, 42]
ORDERS = [3, 4, 5, 8]


# =============================================================================
# Known Answers
# =============================================================================


class TestKnownAnswers:

    def test_chain(self):
        """0→1→2: 0 reaches 2 transitively, no cycles introduced."""
        r = RelationMatrix.from_rows([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
        assert crisp_transitive_closure(r).to_rows() == [[0, 1, 1], [0, 0, 1], [0, 0, 0]]

    def test_long_chain(self):
        n = 6
        rows = [[1 if j == i + 1 else 0 for j in range(n)] for i in range(n)]
        closure = crisp_transitive_closure(RelationMatrix.from_rows(rows))
        expected = [[1 if j > i else 0 for j in range(n)] for i in range(n)]
        assert closure.to_rows() == expected

    def test_three_cycle_stops_at_n_minus_1_hops(self):
        """
        0→1→2→0: every off-diagonal pair is reachable within 2 hops,
        but i→i needs 3 hops, beyond the n-1 bound, so the diagonal stays 0.
        """
        r = RelationMatrix.from_rows([[0, 1, 0], [0, 0, 1], [1, 0, 0]])
        assert crisp_transitive_closure(r).to_rows() == [[0, 1, 1], [1, 0, 1], [1, 1, 0]]

    def test_input_not_modified(self):
        rows = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
        r = RelationMatrix.from_rows(rows)
        crisp_transitive_closure(r)
        assert r.to_rows() == rows


class TestBoundaries:
    """n ≤ 2: the loop body never runs and R is returned unchanged."""

    def test_order_zero(self):
        closure, receipt = compute_crisp_closure(RelationMatrix(0))
        assert closure == RelationMatrix(0)
        assert receipt.iterations == 0

    @pytest.mark.parametrize("value", [0, 1])
    def test_order_one(self, value):
        r = RelationMatrix.from_rows([[value]])
        assert crisp_transitive_closure(r).to_rows() == [[value]]

    def test_order_two_swap_unchanged(self):
        """[[0,1],[1,0]]: no 2-hop step is taken, diagonal stays 0."""
        r = RelationMatrix.from_rows([[0, 1], [1, 0]])
        closure, receipt = compute_crisp_closure(r)
        assert closure.to_rows() == [[0, 1], [1, 0]]
        assert receipt.iterations == 0

    def test_result_is_a_copy(self):
        r = RelationMatrix.from_rows([[0, 1], [0, 0]])
        closure = crisp_transitive_closure(r)
        closure[1, 0] = 1
        assert r[1, 0] == 0


# =============================================================================
# Properties
# =============================================================================


class TestProperties:

    @pytest.mark.parametrize("n", ORDERS)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_dag_matches_reference(self, n, seed):
        r = random_dag(n, seed)
        closure = crisp_transitive_closure(r)
        assert np.array_equal(closure.to_array(), warshall_reference(r.to_rows()))

    @pytest.mark.parametrize("n", ORDERS)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_reflexive_matches_reference(self, n, seed):
        r = random_reflexive(n, seed)
        closure = crisp_transitive_closure(r)
        assert np.array_equal(closure.to_array(), warshall_reference(r.to_rows()))

    @pytest.mark.parametrize("seed", SEEDS)
    def test_extensive(self, seed):
        r = random_reflexive(6, seed)
        assert dominates(crisp_transitive_closure(r), r)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_idempotent(self, seed):
        for r in (random_dag(6, seed), random_reflexive(6, seed)):
            once = crisp_transitive_closure(r)
            assert crisp_transitive_closure(once) == once

    @pytest.mark.parametrize("seed", SEEDS)
    def test_transitive(self, seed):
        for r in (random_dag(7, seed), random_reflexive(7, seed)):
            assert is_transitive(crisp_transitive_closure(r))

    @pytest.mark.parametrize("n", ORDERS)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_symmetry_preserved(self, n, seed):
        r = random_symmetric(n, seed)
        assert is_symmetric(crisp_transitive_closure(r))

    def test_deterministic(self):
        r = random_dag(8, 5)
        first, first_receipt = compute_crisp_closure(r)
        second, second_receipt = compute_crisp_closure(r)
        assert first == second
        assert first_receipt == second_receipt


# =============================================================================
# Receipt
# =============================================================================


class TestReceipt:

    def test_chain_of_four(self):
        """0→1→2→3: 3 one-hop pairs, 2 two-hop pairs, 1 three-hop pair."""
        r = RelationMatrix.from_rows([
            [0, 1, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
            [0, 0, 0, 0],
        ])
        _, receipt = compute_crisp_closure(r)

        assert receipt.kind == "crisp"
        assert receipt.order == 4
        assert receipt.iterations == 2
        assert receipt.reachable_per_hop == [3, 2, 1]

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 6])
    def test_iterations_count(self, n):
        _, receipt = compute_crisp_closure(RelationMatrix(n))
        assert receipt.iterations == max(n - 2, 0)
        assert len(receipt.reachable_per_hop) == max(n - 1, 1)

    def test_hash_tracks_result(self):
        a, receipt_a = compute_crisp_closure(random_dag(5, 0))
        b, receipt_b = compute_crisp_closure(random_dag(5, 1))
        assert (a == b) == (receipt_a.result_hash == receipt_b.result_hash)
