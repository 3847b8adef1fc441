"""Diagnostic logging subsystem for array-utils.

Provides immutable per-call operation records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from array_utils.logging.logger import OperationLogger
from array_utils.logging.types import OperationRecord

__all__ = [
    "OperationLogger",
    "OperationRecord",
]
