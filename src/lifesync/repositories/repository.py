"""Repository abstraction layer for LifeSync.

This module defines the ports the rest of the application talks to. Concrete
adapters live in ``lifesync.adapters``: key-value backed ones (browser-style
local storage, either in memory or in a JSON file) and REST ones that talk to
the LifeSync server.

Every adapter follows the same persistence contract: writes are best-effort,
so a failing store is logged and otherwise ignored rather than surfaced to
the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lifesync.models import Note, Session, SessionCreate, Todo, TodoUpdate

TODOS_KEY = "lifesync-todos"
NOTES_KEY = "lifesync-notes"
SESSIONS_KEY = "lifesync-sessions"
THEME_KEY = "lifesync-theme"


class KeyValueStore(ABC):
    """String key-value storage in the shape of browser ``localStorage``.

    Implementations may raise on failure (``OSError``, ``ValueError``);
    repositories built on top of them catch and log.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete *key*; absent keys are ignored."""


class SessionRepository(ABC):
    """Append-only log of completed sessions, oldest first."""

    @abstractmethod
    def append(self, entry: SessionCreate) -> Session:
        """Record a session.

        Args:
            entry: Session type and minutes; the date defaults to now

        Returns:
            The stored Session with its assigned id
        """

    @abstractmethod
    def list(self) -> list[Session]:
        """Return every logged session."""

    @abstractmethod
    def remove(self, session_id: int) -> None:
        """Drop the session with *session_id*; no-op when absent."""


class NoteRepository(ABC):
    """Notes, newest first."""

    @abstractmethod
    def add(self, text: str) -> Note:
        """Prepend a note."""

    @abstractmethod
    def list(self) -> list[Note]:
        """Return all notes, newest first."""

    @abstractmethod
    def remove(self, note_id: int) -> None:
        """Delete a note; no-op when absent."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every note."""


class TodoRepository(ABC):
    """Task list, in the order tasks were added."""

    @abstractmethod
    def add(self, text: str) -> Todo:
        """Append a new, not yet completed task.

        Raises:
            ValidationError: If the text is empty or too long
        """

    @abstractmethod
    def list(self) -> list[Todo]:
        """Return all tasks."""

    @abstractmethod
    def update(self, todo_id: int, changes: TodoUpdate) -> Todo | None:
        """Merge *changes* into a task; returns the merged task or None."""

    @abstractmethod
    def remove(self, todo_id: int) -> None:
        """Delete a task; no-op when absent."""

    def toggle(self, todo_id: int) -> Todo | None:
        """Flip a task's completed flag."""
        for todo in self.list():
            if todo.id == todo_id:
                return self.update(todo_id, TodoUpdate(completed=not todo.completed))
        return None

    def clear_completed(self) -> int:
        """Delete all completed tasks; returns how many were removed."""
        done = [todo.id for todo in self.list() if todo.completed]
        for todo_id in done:
            self.remove(todo_id)
        return len(done)


class PreferenceRepository(ABC):
    """User interface preferences."""

    @abstractmethod
    def get_theme(self) -> str:
        """Return "light" or "dark"."""

    @abstractmethod
    def set_theme(self, theme: str) -> None:
        """Persist the theme."""
