"""Frequency aggregation subsystem for array-utils.

Finds the most frequently occurring derived value(s) of a sequence, keyed by
a caller-supplied identity function.
"""

from array_utils.frequency.mode import (
    build_frequency_table,
    most_frequent_entries,
    select_most_frequent,
)
from array_utils.frequency.types import FrequencyEntry

__all__ = [
    "FrequencyEntry",
    "build_frequency_table",
    "most_frequent_entries",
    "select_most_frequent",
]
