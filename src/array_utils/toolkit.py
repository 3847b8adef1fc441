"""Configured facade over the array-utils functions.

The plain functions are stateless and take every policy decision as an
argument. ArrayToolkit binds those decisions to an ArrayUtilsConfig once,
accepts per-call overrides, and reports each call to an OperationLogger::

    toolkit = ArrayToolkit(ArrayUtilsConfig(tie_policy="last_wins", log_level="summary"))
    toolkit.select_best(rows, lambda r: r.score, operator.gt)
    toolkit.split_by("a,b", 0, False, lambda c: c == ",", overrides={"log_level": "full"})
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING, Any

from array_utils.config import ArrayUtilsConfig, resolve_config
from array_utils.exceptions import ConfigValidationError
from array_utils.frequency.mode import select_most_frequent
from array_utils.logging.logger import OperationLogger
from array_utils.logging.types import OperationRecord
from array_utils.selection.registry import TieBreakRegistry
from array_utils.selection.selector import select_best, select_bests
from array_utils.tokenize.splitter import split_by

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from array_utils.selection.base import TieBreakPolicy
    from array_utils.selection.types import Equal, Projection, StrictlyBetter, T

logger = logging.getLogger("array_utils")


def _config_hash(config: ArrayUtilsConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


def _build_policy(config: ArrayUtilsConfig) -> TieBreakPolicy:
    """Build the tie-break policy named by ``config.tie_policy``.

    Raises:
        ConfigValidationError: If the policy name is not registered.
    """
    try:
        return TieBreakRegistry.build(config)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc


class _CallState:
    """Resolved configuration for one toolkit call."""

    __slots__ = ("config", "config_hash_str", "policy")

    def __init__(
        self,
        config: ArrayUtilsConfig,
        policy: TieBreakPolicy,
        config_hash_str: str,
    ) -> None:
        self.config = config
        self.policy = policy
        self.config_hash_str = config_hash_str


class ArrayToolkit:
    """Selection, mode finding and tokenizing bound to one configuration.

    Every method accepts an optional ``overrides`` dict of per-call config
    fields (``tie_policy``, ``log_level``). Calls never share element data;
    the only state the toolkit keeps is the diagnostic record list.
    """

    def __init__(self, config: ArrayUtilsConfig | None = None) -> None:
        """Initialize the toolkit.

        Args:
            config: Configuration to bind. Defaults to ``ArrayUtilsConfig()``,
                which reads ``ARRAY_UTILS_*`` environment variables.

        Raises:
            ConfigValidationError: If ``config.tie_policy`` is not registered.
        """
        self._default_config = config if config is not None else ArrayUtilsConfig()
        self._default_state = _CallState(
            self._default_config,
            _build_policy(self._default_config),
            _config_hash(self._default_config),
        )
        self._operation_logger = OperationLogger(self._default_config)

        logger.debug(
            "ArrayToolkit initialized: tie_policy=%s, log_level=%s, diagnostic_mode=%s",
            self._default_config.tie_policy,
            self._default_config.log_level,
            self._default_config.diagnostic_mode,
        )

    @property
    def config(self) -> ArrayUtilsConfig:
        """The bound default configuration."""
        return self._default_config

    @property
    def operation_logger(self) -> OperationLogger:
        """Logger receiving one OperationRecord per call."""
        return self._operation_logger

    def select_best(
        self,
        elements: Iterable[T],
        projection: Projection[T, Any],
        is_strictly_better: StrictlyBetter,
        overrides: dict[str, Any] | None = None,
    ) -> T | None:
        """Single-best selection using the configured tie-break policy."""
        state = self._resolve(overrides)
        items = list(elements)
        started = time.perf_counter()
        result = select_best(items, projection, is_strictly_better, policy=state.policy)
        self._record("select_best", len(items), 1 if items else 0, started, state)
        return result

    def select_bests(
        self,
        elements: Iterable[T],
        projection: Projection[T, Any],
        is_strictly_better: StrictlyBetter,
        is_equal: Equal,
        overrides: dict[str, Any] | None = None,
    ) -> set[T]:
        """Tie-preserving multi-best selection."""
        state = self._resolve(overrides)
        items = list(elements)
        started = time.perf_counter()
        result = select_bests(items, projection, is_strictly_better, is_equal)
        self._record("select_bests", len(items), len(result), started, state)
        return result

    def select_most_frequent(
        self,
        elements: Iterable[T],
        derive_value: Callable[[T], Any | None],
        value_to_id: Callable[[Any], str],
        overrides: dict[str, Any] | None = None,
    ) -> set[Any]:
        """Most frequent derived value(s)."""
        state = self._resolve(overrides)
        items = list(elements)
        started = time.perf_counter()
        result = select_most_frequent(items, derive_value, value_to_id)
        self._record("select_most_frequent", len(items), len(result), started, state)
        return result

    def split_by(
        self,
        text: str,
        start_with: int,
        combine_start_with_first_segment: bool,
        is_boundary: Callable[[str], bool],
        overrides: dict[str, Any] | None = None,
    ) -> list[str]:
        """Predicate-driven split; ``input_count`` is the text length."""
        state = self._resolve(overrides)
        started = time.perf_counter()
        result = split_by(text, start_with, combine_start_with_first_segment, is_boundary)
        self._record("split_by", len(text), len(result), started, state)
        return result

    def _resolve(self, overrides: dict[str, Any] | None) -> _CallState:
        """Resolve per-call overrides into a call state.

        Raises:
            ConfigValidationError: On invalid override keys or policy names.
        """
        if not overrides:
            return self._default_state
        config = resolve_config(self._default_config, overrides)
        return _CallState(config, _build_policy(config), _config_hash(config))

    def _record(
        self,
        operation: str,
        input_count: int,
        result_count: int,
        started: float,
        state: _CallState,
    ) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        record = OperationRecord(
            timestamp_ns=time.time_ns(),
            operation=operation,
            input_count=input_count,
            result_count=result_count,
            elapsed_ms=elapsed_ms,
            tie_policy=state.policy.name,
            config_hash=state.config_hash_str,
        )
        self._operation_logger.log_operation(record, log_level=state.config.log_level)
