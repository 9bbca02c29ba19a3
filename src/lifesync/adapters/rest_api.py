"""REST API adapters: repositories backed by the LifeSync server.

They honour the same best-effort contract as the local adapters. A failed
read returns the last records fetched successfully, and a failed write is
logged and returns the record as it would have been stored.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from lifesync.api.client import APIClient, APIError
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
    NoteRepository,
    SessionRepository,
    TodoRepository,
)
from lifesync.utils.ids import new_id

logger = logging.getLogger(__name__)

_FAILURES = (httpx.HTTPError, APIError, ValueError)

RecordT = TypeVar("RecordT", Session, Note, Todo)


def _now_iso() -> str:
    return datetime.now().astimezone().isoformat()


class _RestRepository:
    def __init__(self, client: APIClient):
        self.client = client

    def _call(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        try:
            return self.client.call(method, path, json=json)
        except _FAILURES as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return None

    def _fetch_list(self, path: str, model: type[RecordT], cache: list[RecordT]) -> list[RecordT]:
        data = self._call("GET", path)
        if not isinstance(data, list):
            return list(cache)
        try:
            return [model.model_validate(item) for item in data]
        except PydanticValidationError as e:
            logger.warning("GET %s returned malformed records: %s", path, e)
            return list(cache)


class RestSessionLog(_RestRepository, SessionRepository):
    """Session log stored by the server under ``/api/sessions``."""

    def __init__(self, client: APIClient):
        super().__init__(client)
        self._cache: list[Session] = []

    def append(self, entry: SessionCreate) -> Session:
        data = self._call(
            "POST", "/api/sessions", json={"type": entry.type, "minutes": entry.minutes}
        )
        try:
            return Session.model_validate(data)
        except PydanticValidationError:
            return Session(
                id=new_id(),
                type=entry.type,
                minutes=entry.minutes,
                date=entry.date or _now_iso(),
            )

    def list(self) -> list[Session]:
        self._cache = self._fetch_list("/api/sessions", Session, self._cache)
        return list(self._cache)

    def remove(self, session_id: int) -> None:
        # The server keeps sessions append-only.
        logger.info("session %s not removed: the server log is append-only", session_id)


class RestNoteLog(_RestRepository, NoteRepository):
    """Notes stored by the server under ``/api/notes``."""

    def __init__(self, client: APIClient):
        super().__init__(client)
        self._cache: list[Note] = []

    def add(self, text: str) -> Note:
        text = validate_note_text(text)
        data = self._call("POST", "/api/notes", json={"text": text})
        try:
            return Note.model_validate(data)
        except PydanticValidationError:
            return Note(id=new_id(), text=text, created_at=_now_iso())

    def list(self) -> list[Note]:
        self._cache = self._fetch_list("/api/notes", Note, self._cache)
        return list(self._cache)

    def remove(self, note_id: int) -> None:
        self._call("DELETE", f"/api/notes/{note_id}")

    def clear(self) -> None:
        for note in self.list():
            self.remove(note.id)


class RestTodoList(_RestRepository, TodoRepository):
    """Tasks stored by the server under ``/api/todos``."""

    def __init__(self, client: APIClient):
        super().__init__(client)
        self._cache: list[Todo] = []

    def add(self, text: str) -> Todo:
        text = validate_task_text(text)
        data = self._call("POST", "/api/todos", json={"text": text})
        try:
            return Todo.model_validate(data)
        except PydanticValidationError:
            return Todo(id=new_id(), text=text, completed=False, created_at=_now_iso())

    def list(self) -> list[Todo]:
        self._cache = self._fetch_list("/api/todos", Todo, self._cache)
        return list(self._cache)

    def update(self, todo_id: int, changes: TodoUpdate) -> Todo | None:
        data = self._call(
            "PATCH", f"/api/todos/{todo_id}", json=changes.model_dump(exclude_none=True)
        )
        if data is None:
            return None
        try:
            return Todo.model_validate(data)
        except PydanticValidationError as e:
            logger.warning("PATCH /api/todos/%s returned a malformed todo: %s", todo_id, e)
            return None

    def remove(self, todo_id: int) -> None:
        self._call("DELETE", f"/api/todos/{todo_id}")
