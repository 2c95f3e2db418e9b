"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .actions import Action


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key names to a single action."""

    combos: tuple[str, ...]
    action: Action


class KeyComboRegistry:
    """Small key-to-action table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional key normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._actions: dict[str, Action] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[self._normalize(combo)] = binding.action
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, key: str) -> Action | None:
        """Return the action bound to ``key``, or ``None`` when unbound."""
        return self._actions.get(self._normalize(key))


__all__ = ["KeyComboBinding", "KeyComboRegistry"]
