"""Tests for the ArrayToolkit facade."""

from __future__ import annotations

import logging
import operator
from typing import Any

import pytest

from array_utils.config import ArrayUtilsConfig
from array_utils.exceptions import ConfigValidationError, RangeError
from array_utils.toolkit import ArrayToolkit


def _comma(character: str) -> bool:
    return character == ","


@pytest.fixture
def toolkit(default_config: ArrayUtilsConfig) -> ArrayToolkit:
    return ArrayToolkit(default_config)


@pytest.fixture
def diagnostic_toolkit(diagnostic_config: ArrayUtilsConfig) -> ArrayToolkit:
    return ArrayToolkit(diagnostic_config)


class TestToolkitOperations:
    """The facade returns exactly what the plain functions return."""

    def test_select_best_first_wins_by_default(
        self, toolkit: ArrayToolkit, players: list[Any]
    ) -> None:
        best = toolkit.select_best(players, lambda p: p.score, operator.gt)
        assert best is not None
        assert best.name == "bob"

    def test_select_best_configured_last_wins(self, players: list[Any]) -> None:
        config = ArrayUtilsConfig(_env_file=None, tie_policy="last_wins")  # type: ignore[call-arg]
        best = ArrayToolkit(config).select_best(players, lambda p: p.score, operator.gt)
        assert best is not None
        assert best.name == "dan"

    def test_select_best_per_call_override(
        self, toolkit: ArrayToolkit, players: list[Any]
    ) -> None:
        best = toolkit.select_best(
            players, lambda p: p.score, operator.gt, overrides={"tie_policy": "last_wins"}
        )
        assert best is not None
        assert best.name == "dan"
        # Defaults are untouched by the override.
        again = toolkit.select_best(players, lambda p: p.score, operator.gt)
        assert again is not None
        assert again.name == "bob"

    def test_select_best_empty(self, toolkit: ArrayToolkit) -> None:
        assert toolkit.select_best([], abs, operator.gt) is None

    def test_select_bests(self, toolkit: ArrayToolkit, players: list[Any]) -> None:
        bests = toolkit.select_bests(players, lambda p: p.score, operator.gt, operator.eq)
        assert {p.name for p in bests} == {"bob", "dan"}

    def test_select_most_frequent(self, toolkit: ArrayToolkit) -> None:
        assert toolkit.select_most_frequent([1, 1, 2, 2], lambda v: v, str) == {1, 2}

    def test_split_by(self, toolkit: ArrayToolkit) -> None:
        assert toolkit.split_by("a,b,c", 0, False, _comma) == ["a", ",b", ",c"]

    def test_split_by_range_error_propagates(self, toolkit: ArrayToolkit) -> None:
        with pytest.raises(RangeError):
            toolkit.split_by("abc", 9, False, _comma)


class TestToolkitConfiguration:
    """Configuration errors surface as ConfigValidationError."""

    def test_unknown_policy_in_config(self) -> None:
        config = ArrayUtilsConfig(_env_file=None, tie_policy="random")  # type: ignore[call-arg]
        with pytest.raises(ConfigValidationError, match="random"):
            ArrayToolkit(config)

    def test_unknown_policy_in_override(self, toolkit: ArrayToolkit) -> None:
        with pytest.raises(ConfigValidationError):
            toolkit.select_best([1], abs, operator.gt, overrides={"tie_policy": "random"})

    def test_lifetime_field_override_rejected(self, toolkit: ArrayToolkit) -> None:
        with pytest.raises(ConfigValidationError):
            toolkit.split_by("a", 0, False, _comma, overrides={"diagnostic_mode": True})

    def test_config_property(self, default_config: ArrayUtilsConfig) -> None:
        assert ArrayToolkit(default_config).config is default_config


class TestToolkitDiagnostics:
    """Every call produces one OperationRecord."""

    def test_records_each_call(self, diagnostic_toolkit: ArrayToolkit, players: list[Any]) -> None:
        diagnostic_toolkit.select_best(players, lambda p: p.score, operator.gt)
        diagnostic_toolkit.select_bests(players, lambda p: p.score, operator.gt, operator.eq)
        diagnostic_toolkit.select_most_frequent([1, 1, 2], lambda v: v, str)
        diagnostic_toolkit.split_by("a,b", 0, False, _comma)

        records = diagnostic_toolkit.operation_logger.get_diagnostic_data()
        assert [(r.operation, r.input_count, r.result_count) for r in records] == [
            ("select_best", 5, 1),
            ("select_bests", 5, 2),
            ("select_most_frequent", 3, 1),
            ("split_by", 3, 2),
        ]
        assert all(r.elapsed_ms >= 0.0 for r in records)
        assert all(len(r.config_hash) == 16 for r in records)

    def test_record_carries_override_policy(self, diagnostic_toolkit: ArrayToolkit) -> None:
        diagnostic_toolkit.select_best([1, 1], abs, operator.gt)
        diagnostic_toolkit.select_best(
            [1, 1], abs, operator.gt, overrides={"tie_policy": "last_wins"}
        )
        first, second = diagnostic_toolkit.operation_logger.get_diagnostic_data()
        assert first.tie_policy == "first_wins"
        assert second.tie_policy == "last_wins"
        assert first.config_hash != second.config_hash

    def test_empty_select_best_records_zero_results(self, diagnostic_toolkit: ArrayToolkit) -> None:
        diagnostic_toolkit.select_best([], abs, operator.gt)
        (record,) = diagnostic_toolkit.operation_logger.get_diagnostic_data()
        assert record.result_count == 0

    def test_no_records_without_diagnostic_mode(self, toolkit: ArrayToolkit) -> None:
        toolkit.split_by("a,b", 0, False, _comma)
        assert toolkit.operation_logger.get_diagnostic_data() == []

    def test_summary_logging(
        self, default_config: ArrayUtilsConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        toolkit = ArrayToolkit(default_config)
        with caplog.at_level(logging.INFO, logger="array_utils"):
            toolkit.split_by("a,b", 0, False, _comma, overrides={"log_level": "summary"})
        messages = [r.message for r in caplog.records]
        assert any("op=split_by" in m and "results=2" in m for m in messages)
