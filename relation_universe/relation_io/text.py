"""
Text reader and writer for relation matrices.

Provides:
- RelationReader: whitespace tokenizer over a text stream
    - read_order(): non-negative integer n
    - read_relation(n): n² reals in row-major order
- read_relation(stream, n): one-shot helper
- format_relation / write_relation: fixed-width row-major output

Input format (tokens may be split across lines arbitrarily):
    3
    0 0.5 0
    0 0   0.8
    0 0   0

Output format: each value in `g` format right-aligned in a FIELD_WIDTH
field followed by one space, one row per line:
    "    0   0.5   0.5 "
"""

import math
from typing import Iterator, TextIO

from relation_core.errors import InputParseError
from relation_core.types import RelationMatrix

FIELD_WIDTH = 5


def _plain(token: str) -> str:
    # int() and float() accept "1_000"; numbers in the stream never carry digit separators
    if "_" in token:
        raise ValueError(token)
    return token


# =============================================================================
# Reading
# =============================================================================


class RelationReader:
    """
    Sequential token reader shared by the order prompt and the matrix body.

    Args:
        stream: Text stream (file, sys.stdin, io.StringIO)
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._tokens = self._iter_tokens()
        self.tokens_read = 0

    def _iter_tokens(self) -> Iterator[str]:
        for line in self._stream:
            yield from line.split()

    def _next_token(self, what: str) -> str:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputParseError(
                f"Unexpected end of input while reading {what} "
                f"(after {self.tokens_read} tokens)"
            ) from None
        self.tokens_read += 1
        return token

    def read_order(self) -> int:
        """
        Read the relation order n.

        Raises:
            InputParseError: If missing, not an integer, or negative
        """
        token = self._next_token("relation order")
        try:
            order = int(_plain(token))
        except ValueError:
            raise InputParseError(f"Relation order must be an integer, got {token!r}") from None

        if order < 0:
            raise InputParseError(f"Relation order must be non-negative, got {order}")
        return order

    def read_weight(self, row: int, col: int) -> float:
        token = self._next_token(f"weight ({row}, {col})")
        try:
            value = float(_plain(token))
        except ValueError:
            raise InputParseError(
                f"Weight ({row}, {col}) is not a real number: {token!r}"
            ) from None

        if not math.isfinite(value):
            raise InputParseError(f"Weight ({row}, {col}) must be finite, got {token!r}")
        return value

    def read_relation(self, order: int, validate: bool = True) -> RelationMatrix:
        """
        Read order² weights row-major into a new matrix.

        Args:
            order: Relation order n
            validate: Reject weights outside [0, 1] (False keeps them unchanged)

        Returns:
            RelationMatrix of order n

        Raises:
            InputParseError: On missing, unparseable, non-finite or
                (when validate=True) out-of-range weights
        """
        relation = RelationMatrix(order)
        for row in range(order):
            for col in range(order):
                value = self.read_weight(row, col)
                if validate and not 0.0 <= value <= 1.0:
                    raise InputParseError(
                        f"Weight ({row}, {col}) = {value} outside [0, 1]"
                    )
                relation[row, col] = value
        return relation


def read_relation(stream: TextIO, order: int, validate: bool = True) -> RelationMatrix:
    """Read an order×order relation from a text stream (see RelationReader)."""
    return RelationReader(stream).read_relation(order, validate=validate)


# =============================================================================
# Writing
# =============================================================================


def format_weight(value: float, width: int = FIELD_WIDTH) -> str:
    """Shortest general form (6 significant digits), right-aligned."""
    return f"{value:>{width}g}"


def format_relation(matrix: RelationMatrix, width: int = FIELD_WIDTH) -> str:
    """
    Render a relation row-major, one row per line.

    Examples:
        >>> format_relation(RelationMatrix.from_rows([[0, 0.5], [1, 0]]))
        '    0   0.5 \\n    1     0 \\n'
    """
    lines = []
    for row in matrix.rows():
        lines.append("".join(format_weight(value, width) + " " for value in row))
    return "".join(line + "\n" for line in lines)


def write_relation(matrix: RelationMatrix, stream: TextIO, width: int = FIELD_WIDTH) -> None:
    """Write format_relation(matrix) to a stream."""
    stream.write(format_relation(matrix, width))
