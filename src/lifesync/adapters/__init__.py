"""Adapters module - Repository implementations for different storage backends.

This package contains concrete implementations (adapters) for the repository interfaces:
- memory_store / file_store: key-value stores in the shape of browser local storage
- local: repositories persisted through a key-value store
- rest_api: repositories backed by the LifeSync server
"""

from .file_store import JsonFileStore
from .local import LocalNoteLog, LocalPreferences, LocalSessionLog, LocalTodoList
from .memory_store import MemoryStore
from .rest_api import RestNoteLog, RestSessionLog, RestTodoList

__all__ = [
    # Key-value stores
    "JsonFileStore",
    "MemoryStore",
    # Key-value backed repositories
    "LocalNoteLog",
    "LocalPreferences",
    "LocalSessionLog",
    "LocalTodoList",
    # REST API adapters
    "RestNoteLog",
    "RestSessionLog",
    "RestTodoList",
]
