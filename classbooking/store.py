"""Key-value storage shared by the service layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class MapStore(ABC):
    """A simple key-value store."""

    @abstractmethod
    def load(self, key: str) -> Any:
        """Return the value for ``key``; raise KeyError if absent."""

    @abstractmethod
    def store(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class MemoryMapStore(MapStore):
    """A dictionary-backed store; callers synchronise access themselves."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def load(self, key):
        return self._data[key]

    def store(self, key, value):
        self._data[key] = value

    def delete(self, key):
        self._data.pop(key, None)


_instance: MemoryMapStore | None = None


def new_map_store(lock):
    """Return the process-wide store, creating it under ``lock`` on first use."""
    global _instance
    if _instance is None:
        print("Application is using Balanced RW Map Mechanism")
        with lock:
            if _instance is None:
                _instance = MemoryMapStore()
    return _instance