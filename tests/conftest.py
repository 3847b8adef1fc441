"""Shared pytest fixtures for array-utils tests.

Provides configuration objects isolated from any local ``.env`` file and a
few small element types used across test modules.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from array_utils.config import ArrayUtilsConfig


@dataclass(frozen=True)
class Player:
    """Hashable element with a name and a score."""

    name: str
    score: int


@pytest.fixture
def default_config() -> ArrayUtilsConfig:
    """Return an ArrayUtilsConfig with all default values."""
    return ArrayUtilsConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> ArrayUtilsConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return ArrayUtilsConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def players() -> list[Player]:
    """Five players; ``bob`` and ``dan`` share the top score."""
    return [
        Player("amy", 3),
        Player("bob", 7),
        Player("cat", 5),
        Player("dan", 7),
        Player("eve", 1),
    ]
