"""Built-in tie-break policies for single-best selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from array_utils.selection.base import TieBreakPolicy
from array_utils.selection.registry import TieBreakRegistry

if TYPE_CHECKING:
    from array_utils.selection.types import StrictlyBetter


@TieBreakRegistry.register("first_wins")
class FirstWinsPolicy(TieBreakPolicy):
    """Keep the earliest element among equally good ones.

    The candidate replaces the running best only when it is strictly better.
    This is the default policy.
    """

    def should_replace(
        self,
        candidate_value: Any,
        best_value: Any,
        is_strictly_better: StrictlyBetter,
    ) -> bool:
        return bool(is_strictly_better(candidate_value, best_value))


@TieBreakRegistry.register("last_wins")
class LastWinsPolicy(TieBreakPolicy):
    """Move to the latest element among equally good ones.

    The candidate replaces the running best unless the running best is
    strictly better than it.
    """

    def should_replace(
        self,
        candidate_value: Any,
        best_value: Any,
        is_strictly_better: StrictlyBetter,
    ) -> bool:
        return not is_strictly_better(best_value, candidate_value)
