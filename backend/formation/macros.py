"""
Registry for custom rendering macros.

A macro is any callable registered under a name; FormBuilder exposes
registered macros as attributes and fails loudly for unknown names.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict


logger = logging.getLogger("formation.macros")


class MacroNotFoundError(AttributeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Method [{name}] does not exist.")
        self.name = name


class MacroRegistry:
    def __init__(self) -> None:
        self._macros: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, macro: Callable[..., Any]) -> None:
        if not callable(macro):
            raise TypeError(f"Macro {name!r} must be callable")
        if name in self._macros:
            logger.debug("Replacing macro %s", name)
        self._macros[name] = macro

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._macros[name]
        except KeyError:
            raise MacroNotFoundError(name) from None

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.get(name)(*args, **kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._macros


__all__ = ["MacroRegistry", "MacroNotFoundError"]
