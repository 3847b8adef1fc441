"""String joining helper."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def to_string(separator: str, to_str: Callable[[T], str], items: Iterable[T]) -> str:
    """Join the string form of every item with *separator*.

    Args:
        separator: Placed between consecutive items.
        to_str: Maps an item to its string form.
        items: Items to render.

    Returns:
        The joined string, ``""`` for empty input.
    """
    return separator.join(to_str(item) for item in items)
