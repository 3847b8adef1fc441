"""List slicing and joining helpers.

All helpers return new lists and validate their bounds up front, raising
RangeError instead of silently clamping.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, TypeVar

from array_utils.exceptions import RangeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

E = TypeVar("E")
T = TypeVar("T")


def trim(amount: int, items: Sequence[T]) -> list[T]:
    """Return *items* without its last *amount* elements.

    Raises:
        RangeError: If *amount* is negative or larger than ``len(items)``.
    """
    if not 0 <= amount <= len(items):
        raise RangeError(f"cannot trim {amount} items from a sequence of length {len(items)}")
    return list(items[: len(items) - amount])


def filter_range(minimum: int, maximum: int, items: Sequence[T]) -> list[T]:
    """Return the items at indexes ``minimum`` through ``maximum`` inclusive.

    Raises:
        RangeError: If ``maximum < minimum`` or either bound is outside *items*.
    """
    if maximum < minimum:
        raise RangeError(f"min ({minimum}) is greater than max ({maximum})")
    if minimum < 0 or maximum >= len(items):
        raise RangeError(
            f"range [{minimum}, {maximum}] is outside a sequence of length {len(items)}"
        )
    return list(items[minimum : maximum + 1])


def filter_out(start: int, end: int, items: Sequence[T]) -> list[T]:
    """Return *items* with the half-open index range ``[start, end)`` removed.

    Raises:
        RangeError: Unless ``0 <= start <= end <= len(items)``.
    """
    if not 0 <= start <= end <= len(items):
        raise RangeError(
            f"range [{start}, {end}) is invalid for a sequence of length {len(items)}"
        )
    return [*items[:start], *items[end:]]


def join(*sequences: Iterable[T]) -> list[T]:
    """Concatenate *sequences* in order into one list."""
    return list(chain.from_iterable(sequences))


def build_array(function: Callable[[E], Iterable[T]], items: Iterable[E]) -> list[T]:
    """Expand every item with *function* and concatenate the results."""
    return list(chain.from_iterable(function(item) for item in items))
