"""Diagnostic logger for toolkit operations.

Uses the standard ``logging`` module with the ``"array_utils"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from array_utils.config import ArrayUtilsConfig
    from array_utils.logging.types import OperationRecord

logger = logging.getLogger("array_utils")


class OperationLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per call with the operation name, sizes,
        tie policy and elapsed time.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: ArrayUtilsConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[OperationRecord] = []

    def log_operation(self, record: OperationRecord, log_level: str | None = None) -> None:
        """Log a single toolkit call.

        Args:
            record: Immutable record of the call.
            log_level: Per-call verbosity; falls back to the configured level.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        level = log_level or self._log_level
        if level == "none":
            return

        if level == "summary":
            logger.info(
                "op=%s inputs=%d results=%d policy=%s elapsed=%.3fms",
                record.operation,
                record.input_count,
                record.result_count,
                record.tie_policy,
                record.elapsed_ms,
            )
        elif level == "full":
            logger.info("operation_record: %s", json.dumps(asdict(record), default=str))
        else:
            logger.warning("Unknown log_level %r, operation not logged", level)

    def get_diagnostic_data(self) -> list[OperationRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        elapsed = [r.elapsed_ms for r in self._records]
        n = len(self._records)
        return {
            "total_operations": n,
            "operations": dict(Counter(r.operation for r in self._records)),
            "total_inputs": sum(r.input_count for r in self._records),
            "total_results": sum(r.result_count for r in self._records),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
