"""
Closure computation receipts.

A receipt records what the iterative closure did:
{
    "kind": "fuzzy",
    "order": 4,
    "iterations": 2,
    "reachable_per_hop": [3, 2, 1],
    "result_hash": 1234567890
}
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class ClosureReceipt:
    """
    Receipt for one closure computation.

    reachable_per_hop[h - 1] is the number of 1-entries in the crisp power
    at hop level h, for h = 1 .. n-1 (or just h = 1 when n ≤ 2).
    """
    kind: str                 # "crisp" or "fuzzy"
    order: int                # Number of nodes n
    iterations: int = 0       # Loop body executions, max(n - 2, 0)
    reachable_per_hop: List[int] = field(default_factory=list)
    result_hash: int = 0      # relation_hash(result)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
