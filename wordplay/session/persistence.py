"""
Persistence - Async state store interface.

The engine never persists anything itself. A StateStore is injected by
the host (browser storage, files, a database) and called only from the
session layer. Stores deal in plain dicts; the session layer owns the
conversion to and from GameSnapshot.

The store does not retry. Callers decide what to do on failure.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Any


class PersistenceError(Exception):
    """Raised when saving state fails."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Failed to save '{key}': {message}")


class StateStore(ABC):
    """Abstract key/value store for serialized state."""

    @abstractmethod
    async def load_state(self, key: str) -> dict[str, Any] | None:
        """Return the stored dict for `key`, or None if absent."""
        pass

    @abstractmethod
    async def save_state(self, key: str, state: dict[str, Any]) -> None:
        """Store `state` under `key`, replacing any previous value."""
        pass


class InMemoryStateStore(StateStore):
    """
    Dict-backed store for tests and the CLI.

    Values are deep-copied in and out so callers never share state with
    the store.
    """

    def __init__(self):
        self._data: dict[str, dict[str, Any]] = {}

    async def load_state(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return deepcopy(value) if value is not None else None

    async def save_state(self, key: str, state: dict[str, Any]) -> None:
        self._data[key] = deepcopy(state)

    def keys(self) -> list[str]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)
