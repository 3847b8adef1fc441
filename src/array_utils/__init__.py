"""array-utils: generic helpers for selecting, aggregating and tokenizing collections.

Pure functions over caller-supplied sequences and callbacks: best-element
selection with pluggable tie-breaking, most-frequent value finding, a
predicate-driven string splitter, and small conversion/slicing helpers.
ArrayToolkit wraps the core functions with configuration and diagnostics.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("array-utils")
except PackageNotFoundError:
    __version__ = "0.0.0"

from array_utils.arrays import build_array, filter_out, filter_range, join, trim
from array_utils.config import ArrayUtilsConfig, resolve_config, validate_overrides
from array_utils.conversion import (
    build,
    collect,
    convert,
    convert_into,
    count,
    count_float,
    count_int,
)
from array_utils.exceptions import ArrayUtilsError, ConfigValidationError, RangeError
from array_utils.frequency import (
    FrequencyEntry,
    build_frequency_table,
    most_frequent_entries,
    select_most_frequent,
)
from array_utils.selection import (
    FirstWinsPolicy,
    LastWinsPolicy,
    TieBreakPolicy,
    TieBreakRegistry,
    select_best,
    select_bests,
)
from array_utils.strings import to_string
from array_utils.tokenize import split_by
from array_utils.toolkit import ArrayToolkit

__all__ = [
    "ArrayToolkit",
    "ArrayUtilsConfig",
    "ArrayUtilsError",
    "ConfigValidationError",
    "FirstWinsPolicy",
    "FrequencyEntry",
    "LastWinsPolicy",
    "RangeError",
    "TieBreakPolicy",
    "TieBreakRegistry",
    "__version__",
    "build",
    "build_array",
    "build_frequency_table",
    "collect",
    "convert",
    "convert_into",
    "count",
    "count_float",
    "count_int",
    "filter_out",
    "filter_range",
    "join",
    "most_frequent_entries",
    "resolve_config",
    "select_best",
    "select_bests",
    "select_most_frequent",
    "split_by",
    "to_string",
    "trim",
    "validate_overrides",
]
