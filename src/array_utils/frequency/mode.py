"""Most-frequent derived value (mode) selection.

Elements are projected to a derived value, the derived values are bucketed
by a caller-supplied identity key, and the buckets with the highest count
win. Tie handling is delegated to multi-best selection, so every value
sharing the top count is returned.

A projection returning None means "this element has no value" and the
element is skipped entirely.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from array_utils.frequency.types import FrequencyEntry
from array_utils.selection.selector import select_bests

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from array_utils.selection.types import T


def build_frequency_table(
    elements: Iterable[T],
    derive_value: Callable[[T], Any | None],
    value_to_id: Callable[[Any], str],
) -> dict[str, FrequencyEntry]:
    """Count how often each derived value occurs.

    Args:
        elements: Source elements. Not mutated.
        derive_value: Maps an element to its derived value, or None to skip it.
        value_to_id: Maps a derived value to its identity key. Equal keys
            must mean equal values.

    Returns:
        Insertion-ordered mapping of identity key to FrequencyEntry.
    """
    table: dict[str, FrequencyEntry] = {}
    for element in elements:
        value = derive_value(element)
        if value is None:
            continue
        key = value_to_id(value)
        entry = table.get(key)
        if entry is None:
            table[key] = FrequencyEntry(key=key, value=value)
        else:
            entry.count += 1
    return table


def most_frequent_entries(
    elements: Iterable[T],
    derive_value: Callable[[T], Any | None],
    value_to_id: Callable[[Any], str],
) -> list[FrequencyEntry]:
    """Return the frequency table rows whose count is maximal.

    Unlike select_most_frequent() this works for unhashable derived values.

    Returns:
        Tied-best entries in order of first occurrence. Empty when no
        element produced a value.
    """
    table = build_frequency_table(elements, derive_value, value_to_id)
    bests = select_bests(
        table.values(),
        operator.attrgetter("count"),
        operator.gt,
        operator.eq,
    )
    return [entry for entry in table.values() if entry in bests]


def select_most_frequent(
    elements: Iterable[T],
    derive_value: Callable[[T], Any | None],
    value_to_id: Callable[[Any], str],
) -> set[Any]:
    """Return the derived value(s) occurring most often.

    Args:
        elements: Source elements. Not mutated.
        derive_value: Maps an element to its derived value, or None to skip it.
        value_to_id: Maps a derived value to its identity key.

    Returns:
        Set of representative values with the highest count (ties included).
        Empty for empty input or when every projection is None.

    Example:
        >>> select_most_frequent([1, 1, 2, 3, 3, 3], lambda v: v, str)
        {3}
    """
    return {entry.value for entry in most_frequent_entries(elements, derive_value, value_to_id)}
