"""FunctionRegistry – named masks and ignore predicates.

Serialised masks never embed code; a custom mask or predicate travels as the
name it was registered under and is looked up again on deserialisation.

Usage::

    registry = FunctionRegistry()

    @registry.register("initials")
    def initials(value, config, param=None):
        return value[0] + config.mask_char * (len(value) - 1)

    maskit = Maskit(registry=registry)
"""
from __future__ import annotations

from typing import Any, Callable, Iterator

from maskit.kernel.errors import UnknownFunctionError

__all__ = ["FunctionRegistry"]


class FunctionRegistry:
    """Name -> callable lookup shared by masks and ignore predicates."""

    def __init__(self, functions: dict[str, Callable[..., Any]] | None = None) -> None:
        self._functions: dict[str, Callable[..., Any]] = {}
        for name, fn in (functions or {}).items():
            self.register(name, fn)

    def register(self, name: str, fn: Callable[..., Any] | None = None) -> Any:
        """Register *fn* under *name*; without *fn* acts as a decorator."""
        if fn is None:
            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self.register(name, func)
                return func
            return decorator

        if not callable(fn):
            raise TypeError(f"Registered function '{name}' is not callable")
        existing = self._functions.get(name)
        if existing is not None and existing is not fn:
            raise ValueError(f"Function name '{name}' is already registered")
        self._functions[name] = fn
        return fn

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunctionError("registered function", name) from None

    def name_of(self, fn: Callable[..., Any]) -> str | None:
        """Reverse lookup by identity; ``None`` when *fn* is not registered."""
        for name, candidate in self._functions.items():
            if candidate is fn:
                return name
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)
