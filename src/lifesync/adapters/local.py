"""Key-value backed repositories (the local storage flavour).

Each repository keeps its records in memory and writes the whole collection
back to its key after every change. Reads and writes are best-effort: a
corrupt or unreadable value leaves the in-memory records as they were, and a
failed write is logged and dropped.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from lifesync.models import (
    Note,
    Session,
    SessionCreate,
    Todo,
    TodoUpdate,
    validate_note_text,
    validate_task_text,
)
from lifesync.repositories import (
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
from lifesync.utils.ids import new_id

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

THEMES = ("light", "dark")
DEFAULT_THEME = "light"


def _now_iso() -> str:
    return datetime.now().astimezone().isoformat()


class _StoredCollection(Generic[RecordT]):
    """A list of records serialized as a JSON array under one key."""

    model: type[RecordT]
    key: str

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._items: list[RecordT] = []
        self.reload()

    def reload(self) -> None:
        """Re-read the collection from the store, keeping current items on failure."""
        try:
            raw = self.store.get_item(self.key)
        except (OSError, ValueError) as e:
            logger.warning("could not read %s: %s", self.key, e)
            return
        if raw is None:
            return

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("ignoring corrupt %s: %s", self.key, e)
            return
        if not isinstance(data, list):
            logger.warning("ignoring %s: expected a JSON array", self.key)
            return

        items = []
        for entry in data:
            try:
                items.append(self.model.model_validate(entry))
            except PydanticValidationError as e:
                logger.warning("skipping malformed record in %s: %s", self.key, e)
        self._items = items

    def _save(self) -> None:
        payload = json.dumps([item.model_dump(by_alias=True) for item in self._items])
        try:
            self.store.set_item(self.key, payload)
        except (OSError, ValueError) as e:
            logger.warning("could not write %s: %s", self.key, e)

    def _snapshot(self) -> list[RecordT]:
        return list(self._items)

    def _remove(self, record_id: int) -> None:
        remaining = [item for item in self._items if item.id != record_id]
        if len(remaining) != len(self._items):
            self._items = remaining
            self._save()


class LocalSessionLog(_StoredCollection[Session], SessionRepository):
    """Session log kept under ``lifesync-sessions``; new sessions go last."""

    model = Session
    key = SESSIONS_KEY

    def append(self, entry: SessionCreate) -> Session:
        session = Session(
            id=new_id(),
            type=entry.type,
            minutes=entry.minutes,
            date=entry.date or _now_iso(),
        )
        self._items.append(session)
        self._save()
        logger.debug("logged %s session of %s minutes", session.type, session.minutes)
        return session

    def list(self) -> list[Session]:
        return self._snapshot()

    def remove(self, session_id: int) -> None:
        self._remove(session_id)


class LocalNoteLog(_StoredCollection[Note], NoteRepository):
    """Notes kept under ``lifesync-notes``; new notes go first."""

    model = Note
    key = NOTES_KEY

    def __init__(self, store: KeyValueStore, validate: bool = True):
        self.validate = validate
        super().__init__(store)

    def add(self, text: str) -> Note:
        text = validate_note_text(text) if self.validate else (text or "")
        note = Note(id=new_id(), text=text, created_at=_now_iso())
        self._items.insert(0, note)
        self._save()
        return note

    def list(self) -> list[Note]:
        return self._snapshot()

    def remove(self, note_id: int) -> None:
        self._remove(note_id)

    def clear(self) -> None:
        self._items = []
        self._save()


class LocalTodoList(_StoredCollection[Todo], TodoRepository):
    """Tasks kept under ``lifesync-todos``; new tasks go last."""

    model = Todo
    key = TODOS_KEY

    def add(self, text: str) -> Todo:
        todo = Todo(
            id=new_id(),
            text=validate_task_text(text),
            completed=False,
            created_at=_now_iso(),
        )
        self._items.append(todo)
        self._save()
        return todo

    def list(self) -> list[Todo]:
        return self._snapshot()

    def update(self, todo_id: int, changes: TodoUpdate) -> Todo | None:
        fields = changes.model_dump(exclude_none=True)
        merged = None
        for index, todo in enumerate(self._items):
            if todo.id == todo_id:
                merged = todo.model_copy(update=fields)
                self._items[index] = merged
        if merged is not None:
            self._save()
        return merged

    def remove(self, todo_id: int) -> None:
        self._remove(todo_id)


class LocalPreferences(PreferenceRepository):
    """Theme stored under ``lifesync-theme`` as a JSON string."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_theme(self) -> str:
        try:
            raw = self.store.get_item(THEME_KEY)
            theme = json.loads(raw) if raw is not None else DEFAULT_THEME
        except (OSError, ValueError) as e:
            logger.warning("could not read theme: %s", e)
            return DEFAULT_THEME
        return theme if theme in THEMES else DEFAULT_THEME

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}'; choose light or dark")
        try:
            self.store.set_item(THEME_KEY, json.dumps(theme))
        except (OSError, ValueError) as e:
            logger.warning("could not write theme: %s", e)
