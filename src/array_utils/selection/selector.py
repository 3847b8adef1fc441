"""Best-element selection over arbitrary sequences.

Two entry points:
    select_best:  one element, ties resolved by a TieBreakPolicy
                  (first-seen wins by default)
    select_bests: every element tied for best, using separate
                  strictly-better and equal predicates

Both functions iterate the input exactly once and call the projection once
per element. The comparator predicates are trusted to describe a single
total preorder over the projected values; inconsistent pairs produce
unspecified (but non-raising) results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from array_utils.selection.policies import FirstWinsPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from array_utils.selection.base import TieBreakPolicy
    from array_utils.selection.types import Equal, Projection, StrictlyBetter, T

_DEFAULT_POLICY = FirstWinsPolicy()


def select_best(
    elements: Iterable[T],
    projection: Projection[T, Any],
    is_strictly_better: StrictlyBetter,
    *,
    policy: TieBreakPolicy | None = None,
) -> T | None:
    """Return the single best element of *elements*.

    The running best is seeded with the first element. Each later element
    replaces it when ``policy.should_replace`` says so; with the default
    first-wins policy that means only when its projected value is strictly
    better, so ties keep the earliest element.

    Args:
        elements: Sequence or iterable of elements. Not mutated.
        projection: Maps an element to the value it is ranked by.
        is_strictly_better: ``(candidate_value, best_value) -> bool``.
        policy: Tie-break policy. Defaults to first-wins.

    Returns:
        The best element, or None if *elements* is empty.
    """
    if policy is None:
        policy = _DEFAULT_POLICY

    iterator = iter(elements)
    try:
        best = next(iterator)
    except StopIteration:
        return None
    best_value = projection(best)

    for candidate in iterator:
        candidate_value = projection(candidate)
        if policy.should_replace(candidate_value, best_value, is_strictly_better):
            best = candidate
            best_value = candidate_value

    return best


def select_bests(
    elements: Iterable[T],
    projection: Projection[T, Any],
    is_strictly_better: StrictlyBetter,
    is_equal: Equal,
) -> set[T]:
    """Return every element whose projected value is tied for best.

    A strictly better candidate discards everything collected so far; an
    equal one joins the set; anything else is dropped.

    Args:
        elements: Sequence or iterable of hashable elements. Not mutated.
        projection: Maps an element to the value it is ranked by.
        is_strictly_better: ``(candidate_value, best_value) -> bool``.
        is_equal: ``(candidate_value, best_value) -> bool``.

    Returns:
        Set of tied-best elements (no defined order). Empty for empty input.
    """
    bests: set[T] = set()

    iterator = iter(elements)
    try:
        first = next(iterator)
    except StopIteration:
        return bests
    bests.add(first)
    best_value = projection(first)

    for candidate in iterator:
        candidate_value = projection(candidate)
        if is_strictly_better(candidate_value, best_value):
            bests.clear()
            bests.add(candidate)
            best_value = candidate_value
        elif is_equal(candidate_value, best_value):
            bests.add(candidate)

    return bests
