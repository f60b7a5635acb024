"""
Core type definitions for relation closure.

Provides:
- RelationMatrix: n×n container of real weights, row-major, order fixed at construction
- Weights / Rows: plain-Python aliases used at the I/O boundary

Entry (i, j) is the strength of the relation from node i to node j:
in [0, 1] for fuzzy relations, in {0, 1} for crisp ones. Values are not
validated here; range checks happen at the input boundary.
"""

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .errors import RelationIndexError

# Row-major nested lists, as read from / written to text
Rows = List[List[float]]

# (row, col) index into a RelationMatrix
Index = Tuple[int, int]


class RelationMatrix:
    """
    Fixed-order square matrix of real weights.

    Storage is a single contiguous numpy float64 buffer of shape (n, n).
    Indexing uses (row, col) tuples with strict bounds: negative indices do
    not wrap around.

    Examples:
        >>> m = RelationMatrix(3)
        >>> m[0, 1] = 0.5
        >>> m[0, 1]
        0.5
        >>> m.order
        3
    """

    __slots__ = ("_order", "_weights")

    def __init__(self, order: int):
        if order < 0:
            raise ValueError(f"Relation order must be non-negative, got {order}")
        self._order = int(order)
        self._weights = np.zeros((self._order, self._order), dtype=np.float64)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "RelationMatrix":
        """
        Build a matrix from row-major nested sequences.

        Args:
            rows: n rows of n weights each

        Returns:
            New RelationMatrix of order n

        Raises:
            ValueError: If rows is not square
        """
        order = len(rows)
        for r, row in enumerate(rows):
            if len(row) != order:
                raise ValueError(
                    f"Relation must be square: row {r} has {len(row)} entries, expected {order}"
                )

        matrix = cls(order)
        if order:
            matrix._weights[:, :] = np.asarray(rows, dtype=np.float64)
        return matrix

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RelationMatrix":
        """Build a matrix from a square 2D array (the array is copied)."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Relation must be a square 2D array, got shape {array.shape}")

        matrix = cls(array.shape[0])
        matrix._weights[:, :] = array
        return matrix

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def order(self) -> int:
        """Number of nodes n."""
        return self._order

    def __len__(self) -> int:
        return self._order

    def _check_index(self, index: Index) -> Tuple[int, int]:
        try:
            row, col = index
        except (TypeError, ValueError):
            raise RelationIndexError(
                f"RelationMatrix index must be a (row, col) pair, got {index!r}"
            ) from None

        if not (0 <= row < self._order and 0 <= col < self._order):
            raise RelationIndexError(
                f"Index ({row}, {col}) out of range for relation of order {self._order}"
            )
        return row, col

    def __getitem__(self, index: Index) -> float:
        row, col = self._check_index(index)
        return float(self._weights[row, col])

    def __setitem__(self, index: Index, value: float) -> None:
        row, col = self._check_index(index)
        self._weights[row, col] = value

    def to_array(self) -> np.ndarray:
        """Copy of the weights as an (n, n) float64 array."""
        return self._weights.copy()

    def to_rows(self) -> Rows:
        """Weights as row-major nested lists of Python floats."""
        return [[float(v) for v in row] for row in self._weights]

    def rows(self) -> Iterator[List[float]]:
        """Iterate rows in order (each row is a fresh list)."""
        for row in self._weights:
            yield [float(v) for v in row]

    def copy(self) -> "RelationMatrix":
        return RelationMatrix.from_array(self._weights)

    # -------------------------------------------------------------------------
    # Comparison / display
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, RelationMatrix):
            return NotImplemented
        return self._order == other._order and bool(np.array_equal(self._weights, other._weights))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"RelationMatrix({self.to_rows()!r})"
