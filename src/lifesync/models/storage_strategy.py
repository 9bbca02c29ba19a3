"""
Strategy Pattern: Storage Strategy Container

The StorageStrategyContext holds one strategy chosen at startup and hands out
its repositories, so commands never branch on where data is stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from lifesync.repositories import (
    KeyValueStore,
    NoteRepository,
    PreferenceRepository,
    SessionRepository,
    TodoRepository,
)


class StorageStrategy(ABC):
    """
    A strategy encapsulates ALL repository implementations for a given
    storage backend (key-value storage or the LifeSync server).
    """

    @abstractmethod
    def get_session_repository(self) -> SessionRepository:
        """Get the session log for this strategy."""

    @abstractmethod
    def get_note_repository(self) -> NoteRepository:
        """Get note repository implementation for this strategy."""

    @abstractmethod
    def get_todo_repository(self) -> TodoRepository:
        """Get todo repository implementation for this strategy."""

    @abstractmethod
    def get_preference_repository(self) -> PreferenceRepository:
        """Get preference repository implementation for this strategy."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Get storage type identifier (for logging/debugging)."""


class LocalStorageStrategy(StorageStrategy):
    """
    Key-value storage strategy.

    Used by the CLI with a JSON file and by the HTTP server with an in-memory
    store.
    """

    def __init__(self, store: KeyValueStore, validate_notes: bool = True):
        """
        Initialize local strategy.

        Args:
            store: Key-value store shared by all repositories
            validate_notes: Reject empty notes (the HTTP API accepts them)
        """
        self.store = store

        # Import here to avoid circular dependencies
        from lifesync.adapters.local import (
            LocalNoteLog,
            LocalPreferences,
            LocalSessionLog,
            LocalTodoList,
        )

        self._session_repo = LocalSessionLog(store)
        self._note_repo = LocalNoteLog(store, validate=validate_notes)
        self._todo_repo = LocalTodoList(store)
        self._preference_repo = LocalPreferences(store)

    @classmethod
    def from_path(cls, path: Path | str) -> "LocalStorageStrategy":
        """Build a strategy persisted to a JSON file."""
        from lifesync.adapters.file_store import JsonFileStore

        return cls(JsonFileStore(path))

    @classmethod
    def in_memory(cls, validate_notes: bool = True) -> "LocalStorageStrategy":
        """Build a strategy whose data lives only in this process."""
        from lifesync.adapters.memory_store import MemoryStore

        return cls(MemoryStore(), validate_notes=validate_notes)

    def get_session_repository(self) -> SessionRepository:
        return self._session_repo

    def get_note_repository(self) -> NoteRepository:
        return self._note_repo

    def get_todo_repository(self) -> TodoRepository:
        return self._todo_repo

    def get_preference_repository(self) -> PreferenceRepository:
        return self._preference_repo

    @property
    def storage_type(self) -> str:
        return "local"


class RemoteStorageStrategy(StorageStrategy):
    """
    LifeSync server strategy.

    Todos, notes and sessions go through the REST API; the theme stays in the
    local preference store because the server does not keep preferences.
    """

    def __init__(self, base_url: str, preferences_store: KeyValueStore, timeout: int = 10, retry: int = 3):
        from lifesync.adapters.local import LocalPreferences
        from lifesync.adapters.rest_api import RestNoteLog, RestSessionLog, RestTodoList
        from lifesync.api.client import APIClient

        self.client = APIClient(base_url=base_url, timeout=timeout, retry=retry)
        self._session_repo = RestSessionLog(self.client)
        self._note_repo = RestNoteLog(self.client)
        self._todo_repo = RestTodoList(self.client)
        self._preference_repo = LocalPreferences(preferences_store)

    def get_session_repository(self) -> SessionRepository:
        return self._session_repo

    def get_note_repository(self) -> NoteRepository:
        return self._note_repo

    def get_todo_repository(self) -> TodoRepository:
        return self._todo_repo

    def get_preference_repository(self) -> PreferenceRepository:
        return self._preference_repo

    @property
    def storage_type(self) -> str:
        return "remote"


class StorageStrategyContext:
    """
    Strategy context that provides access to all repositories.

    Usage:
        context = StorageStrategyContext(LocalStorageStrategy.in_memory())
        context.session_repository.append(SessionCreate(minutes=25))
    """

    def __init__(self, strategy: StorageStrategy):
        self._strategy = strategy

    def switch_strategy(self, new_strategy: StorageStrategy):
        """Switch to a new storage strategy at runtime."""
        self._strategy = new_strategy

    @property
    def storage_type(self) -> str:
        return self._strategy.storage_type

    @property
    def session_repository(self) -> SessionRepository:
        """Get the session log from current strategy."""
        return self._strategy.get_session_repository()

    @property
    def note_repository(self) -> NoteRepository:
        """Get note repository from current strategy."""
        return self._strategy.get_note_repository()

    @property
    def todo_repository(self) -> TodoRepository:
        """Get todo repository from current strategy."""
        return self._strategy.get_todo_repository()

    @property
    def preference_repository(self) -> PreferenceRepository:
        """Get preference repository from current strategy."""
        return self._strategy.get_preference_repository()
