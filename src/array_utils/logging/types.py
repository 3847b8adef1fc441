"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OperationRecord:
    """Immutable record of a single toolkit call.

    Attributes:
        timestamp_ns: Wall-clock time of the call (nanoseconds since epoch).
        operation: Toolkit method name, e.g. ``"select_best"``.
        input_count: Number of input elements (characters for ``split_by``).
        result_count: Number of results (0 or 1 for ``select_best``).
        elapsed_ms: Time spent inside the operation (milliseconds).
        tie_policy: Tie-break policy active for the call.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    timestamp_ns: int
    operation: str
    input_count: int
    result_count: int
    elapsed_ms: float
    tie_policy: str
    config_hash: str
