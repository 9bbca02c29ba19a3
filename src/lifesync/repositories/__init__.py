"""Repository interfaces for LifeSync.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- lifesync.adapters.local (key-value storage, in memory or on disk)
- lifesync.adapters.rest_api (LifeSync server)
"""

from .repository import (
    NOTES_KEY,
    SESSIONS_KEY,
    THEME_KEY,
    TODOS_KEY,
    KeyValueStore,
    NoteRepository,
    PreferenceRepository,
    SessionRepository,
    TodoRepository,
)

__all__ = [
    "NOTES_KEY",
    "SESSIONS_KEY",
    "THEME_KEY",
    "TODOS_KEY",
    "KeyValueStore",
    "NoteRepository",
    "PreferenceRepository",
    "SessionRepository",
    "TodoRepository",
]
