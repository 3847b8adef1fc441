"""Registry for tie-break policy implementations.

Uses a decorator pattern for registration, enabling both built-in and
third-party policies to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from array_utils.selection.base import TieBreakPolicy


class TieBreakRegistry:
    """Registry mapping string names to TieBreakPolicy classes.

    Built-in policies register via the ``@TieBreakRegistry.register()``
    decorator. The ``build()`` class method instantiates the policy named by
    the config's ``tie_policy`` field.
    """

    _registry: ClassVar[dict[str, type[TieBreakPolicy]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[TieBreakPolicy]], type[TieBreakPolicy]]:
        """Decorator that registers a TieBreakPolicy class under *name*.

        Args:
            name: Identifier used in config ``tie_policy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[TieBreakPolicy]) -> type[TieBreakPolicy]:
            if name in cls._registry:
                raise ValueError(f"Tie-break policy '{name}' is already registered")
            klass.name = name
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[TieBreakPolicy]:
        """Return the policy class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown tie-break policy '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> TieBreakPolicy:
        """Instantiate the policy specified by *config.tie_policy*.

        Args:
            config: An ArrayUtilsConfig (or compatible object) with a
                ``tie_policy`` attribute.

        Returns:
            A fresh TieBreakPolicy instance.
        """
        return cls.get(config.tie_policy)()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered policy names."""
        return sorted(cls._registry)
