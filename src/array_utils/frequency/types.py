"""Data types for the frequency aggregation subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class FrequencyEntry:
    """One row of a frequency table.

    Entries compare and hash by identity, so distinct rows stay distinct in
    a set even when they hold equal values.

    Attributes:
        key: Identity key produced by the caller's ``value_to_id``.
        value: Representative value (the first one seen for ``key``).
        count: Number of source elements that mapped to ``key``.
    """

    key: str
    value: Any
    count: int = 1
