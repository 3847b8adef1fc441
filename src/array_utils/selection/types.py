"""Callable types shared by the selection and frequency subsystems."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
V = TypeVar("V")

# Maps an element to the value it is ranked by.
Projection = Callable[[T], V]

# (candidate_value, best_value) -> bool
StrictlyBetter = Callable[[Any, Any], bool]
Equal = Callable[[Any, Any], bool]
