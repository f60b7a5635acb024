"""
Transitive closure engine for crisp and fuzzy relations.

Modules:
- crisp.py: Warshall-style Boolean closure over n-1 hop levels
- fuzzy.py: Max-min closure driven by the crisp reachability powers
- receipt.py: ClosureReceipt (iterations, reachable counts, result hash)
- properties.py: Transitivity / symmetry / containment checks
"""

from .receipt import ClosureReceipt
from .crisp import compute_crisp_closure, crisp_transitive_closure
from .fuzzy import compute_fuzzy_closure, fuzzy_power_step, fuzzy_transitive_closure
from .properties import dominates, is_symmetric, is_transitive, transitivity_violations

__all__ = [
    "ClosureReceipt",
    "compute_crisp_closure",
    "crisp_transitive_closure",
    "compute_fuzzy_closure",
    "fuzzy_power_step",
    "fuzzy_transitive_closure",
    "dominates",
    "is_symmetric",
    "is_transitive",
    "transitivity_violations",
]
