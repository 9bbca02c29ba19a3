"""HTTP backend for LifeSync.

A small Flask app exposing notes, todos, sessions and weekly stats. Every
response is a JSON envelope ``{"ok": true, "data": ...}``. Data lives in the
repositories handed to ``create_app``; by default that is a fresh in-memory
store, so nothing survives a restart.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from lifesync.models import SessionCreate, TodoUpdate, ValidationError, validate_task_text
from lifesync.models.clock.analytics import aggregate_weekly, streak_stats
from lifesync.models.storage_strategy import LocalStorageStrategy, StorageStrategyContext

logger = logging.getLogger(__name__)

DEFAULT_PORT = 4000


def _ok(data: Any):
    return jsonify({"ok": True, "data": data})


def _body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def create_app(repositories: StorageStrategyContext | None = None) -> Flask:
    """Build the Flask app around *repositories*.

    Args:
        repositories: Where records are kept; defaults to an in-memory store
            that accepts notes exactly as posted

    Returns:
        Configured Flask application
    """
    if repositories is None:
        repositories = StorageStrategyContext(LocalStorageStrategy.in_memory(validate_notes=False))

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["lifesync"] = repositories

    notes = repositories.note_repository
    todos = repositories.todo_repository
    sessions = repositories.session_repository

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PATCH, DELETE, OPTIONS"
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return jsonify({"ok": False, "error": str(error)}), 400

    # Notes API
    @app.get("/api/notes")
    def list_notes():
        return _ok([note.to_dict() for note in notes.list()])

    @app.post("/api/notes")
    def create_note():
        note = notes.add(str(_body().get("text") or ""))
        return _ok(note.to_dict())

    @app.delete("/api/notes/<int:note_id>")
    def delete_note(note_id: int):
        notes.remove(note_id)
        return _ok(True)

    # Todos API
    @app.get("/api/todos")
    def list_todos():
        return _ok([todo.to_dict() for todo in todos.list()])

    @app.post("/api/todos")
    def create_todo():
        todo = todos.add(str(_body().get("text") or ""))
        return _ok(todo.to_dict())

    @app.patch("/api/todos/<int:todo_id>")
    def update_todo(todo_id: int):
        body = _body()
        text = body.get("text")
        changes = TodoUpdate(
            text=validate_task_text(text) if isinstance(text, str) else None,
            completed=body.get("completed") if isinstance(body.get("completed"), bool) else None,
        )
        todo = todos.update(todo_id, changes)
        return _ok(todo.to_dict() if todo is not None else None)

    @app.delete("/api/todos/<int:todo_id>")
    def delete_todo(todo_id: int):
        todos.remove(todo_id)
        return _ok(True)

    # Sessions & stats
    @app.get("/api/sessions")
    def list_sessions():
        return _ok([session.to_dict() for session in sessions.list()])

    @app.post("/api/sessions")
    def create_session():
        body = _body()
        entry = SessionCreate(type=str(body.get("type") or "focus"), minutes=body.get("minutes"))
        session = sessions.append(entry)
        logger.info("session logged via API: %s, %s minutes", session.type, session.minutes)
        return _ok(session.to_dict())

    @app.get("/api/stats/weekly")
    def weekly_stats():
        return _ok(aggregate_weekly(sessions.list()).to_dict())

    @app.get("/api/stats/streak")
    def streak():
        return _ok(streak_stats(sessions.list()).to_dict())

    return app
