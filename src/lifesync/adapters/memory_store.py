"""In-process key-value store."""

from __future__ import annotations

from lifesync.repositories import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dictionary-backed store; contents live as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)
