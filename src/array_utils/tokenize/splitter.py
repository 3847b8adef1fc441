"""Predicate-driven string splitting.

Scans a string from a starting offset and cuts it in front of every
character the boundary predicate accepts. The boundary character is kept:
it becomes the first character of the following segment, so the segments
concatenate back to the scanned text.

    split_by("a,b,c", 0, False, lambda c: c == ",")  ->  ["a", ",b", ",c"]

Text before the starting offset is never scanned. It is either returned as
its own leading segment or glued onto the front of the first scanned one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from array_utils.exceptions import RangeError

if TYPE_CHECKING:
    from collections.abc import Callable


def split_by(
    text: str,
    start_with: int,
    combine_start_with_first_segment: bool,
    is_boundary: Callable[[str], bool],
) -> list[str]:
    """Split *text* in front of every boundary character at or after *start_with*.

    Args:
        text: String to split.
        start_with: Offset where scanning begins, in ``[0, len(text)]``.
        combine_start_with_first_segment: If True, the unscanned prefix
            ``text[:start_with]`` is merged into the first segment. If False
            and the prefix is non-empty, it is returned as an extra leading
            segment.
        is_boundary: Side-effect-free predicate over a single character.

    Returns:
        Ordered list of segments. Always at least one element.

    Raises:
        RangeError: If *start_with* is not an int in ``[0, len(text)]``.
    """
    if isinstance(start_with, bool) or not isinstance(start_with, int):
        raise RangeError(f"start_with must be an int, got {type(start_with).__name__}")
    if not 0 <= start_with <= len(text):
        raise RangeError(f"start_with={start_with} is outside [0, {len(text)}] for the given text")

    segments: list[str] = []
    previous_split = start_with
    for index in range(start_with, len(text)):
        if is_boundary(text[index]):
            segments.append(text[previous_split:index])
            previous_split = index
    segments.append(text[previous_split:])

    if combine_start_with_first_segment:
        segments[0] = text[: start_with + len(segments[0])]
    elif start_with > 0:
        segments.insert(0, text[:start_with])

    return segments
