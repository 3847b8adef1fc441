"""Base class for tie-break policies.

A tie-break policy decides, during single-best selection, whether the
element under inspection replaces the running best. Policies only ever see
projected values and the caller's strictly-better predicate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from array_utils.selection.types import StrictlyBetter


class TieBreakPolicy(ABC):
    """Abstract base class for single-best tie-break policies.

    Implementations must agree with the caller's predicate whenever one value
    is strictly better than the other; they differ only in what happens when
    neither is.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def should_replace(
        self,
        candidate_value: Any,
        best_value: Any,
        is_strictly_better: StrictlyBetter,
    ) -> bool:
        """Return True if the candidate should become the new running best.

        Args:
            candidate_value: Projected value of the element being inspected.
            best_value: Projected value of the current running best.
            is_strictly_better: Caller predicate ``(candidate, best) -> bool``.

        Returns:
            Whether the running best moves to the candidate.
        """
