"""Element-wise conversion and numeric reduction helpers.

Thin one-pass wrappers: each walks its input once, applies a caller
function per element and never mutates the source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, MutableSequence, MutableSet

E = TypeVar("E")
R = TypeVar("R")
C = TypeVar("C")
N = TypeVar("N")


def convert(function: Callable[[E], R], items: Iterable[E]) -> list[R]:
    """Return a new list with *function* applied to every item."""
    return [function(item) for item in items]


def convert_into(
    target: MutableSequence[R] | MutableSet[R],
    function: Callable[[E], R],
    items: Iterable[E],
) -> MutableSequence[R] | MutableSet[R]:
    """Add ``function(item)`` for every item to *target* and return *target*.

    Sequences are appended to, sets are added to.
    """
    add = target.append if hasattr(target, "append") else target.add  # type: ignore[union-attr]
    for item in items:
        add(function(item))
    return target


def collect(
    factory: Callable[[Iterable[R]], C],
    function: Callable[[E], R],
    items: Iterable[E],
) -> C:
    """Build a collection with *factory* from the converted items.

    Example:
        >>> collect(frozenset, len, ["a", "bb", "cc"])
        frozenset({1, 2})
    """
    return factory(function(item) for item in items)


def build(target: C, consumer: Callable[[C, E], Any], items: Iterable[E]) -> C:
    """Call ``consumer(target, item)`` for every item and return *target*."""
    for item in items:
        consumer(target, item)
    return target


def count(
    start: N,
    function: Callable[[E], N],
    add: Callable[[N, N], N],
    items: Iterable[E],
) -> N:
    """Fold the projected values of *items* into *start*.

    Args:
        start: Initial total.
        function: Maps an item to a number.
        add: ``(value, running_total) -> new_total``.
        items: Items to reduce.

    Returns:
        The final total (``start`` for empty input).
    """
    total = start
    for item in items:
        total = add(function(item), total)
    return total


def count_int(start: int, function: Callable[[E], int], items: Iterable[E]) -> int:
    """Sum integer projections onto *start* using exact Python integers."""
    return count(start, function, _add_int, items)


def count_float(start: float, function: Callable[[E], float], items: Iterable[E]) -> float:
    """Sum float projections onto *start* in float64."""
    values = np.fromiter((function(item) for item in items), dtype=np.float64)
    return float(start + np.sum(values))


def _add_int(value: int, total: int) -> int:
    return int(value) + total
