"""
Error taxonomy for relation closure.

- DimensionMismatchError: combinator operands of different order
- RelationIndexError: (row, col) outside [0, n)
- InputParseError: malformed, missing or out-of-range input tokens

None of these are retried anywhere: every operation is deterministic.
"""


class ClosureError(Exception):
    """Base class for all relation closure errors."""


class DimensionMismatchError(ClosureError, ValueError):
    """Raised when two matrices of different order are combined."""

    def __init__(self, operation: str, left_order: int, right_order: int):
        self.operation = operation
        self.left_order = left_order
        self.right_order = right_order
        super().__init__(
            f"can't {operation} matrices of different order "
            f"({left_order}×{left_order} vs {right_order}×{right_order})"
        )


class RelationIndexError(ClosureError, IndexError):
    """Raised on out-of-bounds matrix access (a caller bug, not a runtime condition)."""


class InputParseError(ClosureError, ValueError):
    """Raised when relation text input is malformed or insufficient."""
