"""Best-element selection subsystem for array-utils.

Single-best selection with pluggable tie-break policies, and tie-preserving
multi-best selection driven by caller-supplied comparator pairs.
"""

from array_utils.selection.base import TieBreakPolicy
from array_utils.selection.policies import FirstWinsPolicy, LastWinsPolicy
from array_utils.selection.registry import TieBreakRegistry
from array_utils.selection.selector import select_best, select_bests

__all__ = [
    "FirstWinsPolicy",
    "LastWinsPolicy",
    "TieBreakPolicy",
    "TieBreakRegistry",
    "select_best",
    "select_bests",
]
