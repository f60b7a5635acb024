#!/usr/bin/env python3
"""
fuzzy-closure: read a fuzzy relation, print its transitive closure.

Reads the relation order n followed by n² weights (row-major, whitespace
separated) and writes "Transitive closure:" and the closure matrix.

Usage:
    fuzzy-closure < relation.txt
    fuzzy-closure --input relation.txt --verify --receipt receipt.json
    fuzzy-closure --crisp --input relation.txt

Exit status:
    0 on success
    1 on malformed input or unreadable/unwritable files
    other non-zero on uncaught internal errors
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from relation_core.combinators import crisp_derivative
from relation_core.errors import InputParseError
from relation_core.types import RelationMatrix
from relation_closure.crisp import compute_crisp_closure
from relation_closure.fuzzy import compute_fuzzy_closure
from relation_closure.properties import transitivity_violations
from relation_closure.receipt import ClosureReceipt
from relation_io.logs import setup_logger
from relation_io.text import RelationReader, write_relation

logger = logging.getLogger(__name__)

PROMPT = "Enter order of a graph of fuzzy relation: "
HEADER = "Transitive closure:"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-closure",
        description="Compute the transitive closure of a fuzzy relation",
    )
    parser.add_argument(
        "--input", type=Path, default=None, help="Read the relation from PATH (default: stdin)"
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write the closure to PATH (default: stdout)"
    )
    parser.add_argument(
        "--crisp",
        action="store_true",
        help="Compute the crisp closure of the relation's 0/1 derivative instead",
    )
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        help="Accept weights outside [0, 1] unchanged",
    )
    parser.add_argument(
        "--verify", action="store_true", help="Check the result for transitivity"
    )
    parser.add_argument(
        "--receipt", type=Path, default=None, help="Save the closure receipt as JSON to PATH"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to PATH")
    return parser


def load_relation(stream: TextIO, validate: bool = True, prompt: bool = False) -> RelationMatrix:
    """
    Read "n w_00 w_01 ... w_(n-1)(n-1)" from a text stream.

    Args:
        stream: Input text stream
        validate: Reject weights outside [0, 1]
        prompt: Write PROMPT to stdout before reading the order

    Raises:
        InputParseError: On malformed or insufficient input
    """
    if prompt:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()

    reader = RelationReader(stream)
    order = reader.read_order()
    relation = reader.read_relation(order, validate=validate)
    logger.info(f"Read relation of order {order} ({reader.tokens_read} tokens)")
    return relation


def save_receipt(receipt: ClosureReceipt, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(receipt.to_dict(), f, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger("", args.log_file, getattr(logging, args.log_level))

    try:
        if args.input is None:
            relation = load_relation(sys.stdin, args.validate, prompt=sys.stdin.isatty())
        else:
            with open(args.input, "r") as f:
                relation = load_relation(f, args.validate)
    except InputParseError as e:
        logger.error(f"Invalid relation input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read relation: {e}")
        return 1

    if args.crisp:
        closure, receipt = compute_crisp_closure(crisp_derivative(relation))
    else:
        closure, receipt = compute_fuzzy_closure(relation)

    logger.info(
        f"Computed {receipt.kind} closure of order {receipt.order} "
        f"in {receipt.iterations} iterations (hash {receipt.result_hash})"
    )

    if args.verify:
        violations = transitivity_violations(closure)
        if violations:
            logger.warning(
                f"Closure is not transitive: {len(violations)} violating (i, k, j) triples, "
                f"first {violations[0]}"
            )
        else:
            logger.info("Closure is transitive")

    try:
        if args.receipt is not None:
            save_receipt(receipt, args.receipt)
            logger.info(f"Receipt saved to {args.receipt}")

        if args.output is None:
            _write_closure(closure, sys.stdout)
        else:
            with open(args.output, "w") as f:
                _write_closure(closure, f)
    except OSError as e:
        logger.error(f"Cannot write output: {e}")
        return 1

    return 0


def _write_closure(closure: RelationMatrix, stream: TextIO) -> None:
    stream.write(HEADER + "\n")
    write_relation(closure, stream)


if __name__ == "__main__":
    sys.exit(main())
