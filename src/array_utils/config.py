"""Configuration system for array-utils.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (ARRAY_UTILS_*) -> .env file -> field defaults.

Only the ArrayToolkit facade reads configuration. The plain functions in
``array_utils.selection``, ``array_utils.frequency`` and
``array_utils.tokenize`` take everything they need as arguments.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from array_utils.exceptions import ConfigValidationError

# Fields that can be overridden for a single toolkit call.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "tie_policy",
        "log_level",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class ArrayUtilsConfig(BaseSettings):
    """Configuration for the array-utils toolkit.

    Resolution order: init kwargs -> env vars (ARRAY_UTILS_*) -> .env file -> defaults.

    ``diagnostic_mode`` is fixed for the lifetime of a toolkit; the other
    fields may be overridden per call.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARRAY_UTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tie_policy: str = Field(
        default="first_wins",
        description="Tie-break policy for single-best selection: 'first_wins' or 'last_wins'",
    )
    log_level: str = Field(
        default="none",
        description="Operation logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all operation records in memory for analysis",
    )


_ALL_FIELDS = frozenset(ArrayUtilsConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate per-call override keys without creating a config.

    Args:
        overrides: Mapping of config field names to override values.

    Raises:
        ConfigValidationError: If any key is unknown or not overridable per call.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")
        if key not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{key}' is fixed for the toolkit's lifetime and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: ArrayUtilsConfig,
    overrides: dict[str, Any] | None,
) -> ArrayUtilsConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call field overrides, or None.

    Returns:
        ``defaults`` itself when there is nothing to override, otherwise a
        new validated ArrayUtilsConfig.

    Raises:
        ConfigValidationError: If any key is unknown or not overridable per call.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(overrides)
    return ArrayUtilsConfig.model_validate(merged)
