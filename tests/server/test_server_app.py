"""Tests for the Flask backend."""

from __future__ import annotations

from datetime import date

import pytest

from lifesync.models.storage_strategy import LocalStorageStrategy, StorageStrategyContext
from lifesync.server import DEFAULT_PORT, create_app


@pytest.fixture()
def client():
    app = create_app()
    app.testing = True
    return app.test_client()


def _data(response):
    payload = response.get_json()
    assert payload["ok"] is True
    return payload["data"]


def test_default_port():
    assert DEFAULT_PORT == 4000


def test_cors_headers(client):
    response = client.get("/api/notes")
    assert response.headers["Access-Control-Allow-Origin"] == "*"


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


class TestNotes:
    def test_empty_list(self, client):
        assert _data(client.get("/api/notes")) == []

    def test_create_prepends(self, client):
        first = _data(client.post("/api/notes", json={"text": "first"}))
        second = _data(client.post("/api/notes", json={"text": "second"}))

        notes = _data(client.get("/api/notes"))
        assert [n["id"] for n in notes] == [second["id"], first["id"]]
        assert set(first) == {"id", "text", "createdAt"}

    def test_empty_note_accepted(self, client):
        note = _data(client.post("/api/notes", json={}))
        assert note["text"] == ""

    def test_delete(self, client):
        note = _data(client.post("/api/notes", json={"text": "x"}))
        assert _data(client.delete(f"/api/notes/{note['id']}")) is True
        assert _data(client.get("/api/notes")) == []

    def test_delete_unknown_id_is_ok(self, client):
        assert _data(client.delete("/api/notes/123")) is True

    def test_non_integer_id_is_404(self, client):
        assert client.delete("/api/notes/abc").status_code == 404


# ---------------------------------------------------------------------------
# Todos
# ---------------------------------------------------------------------------


class TestTodos:
    def test_create_and_list(self, client):
        todo = _data(client.post("/api/todos", json={"text": " Ship it "}))
        assert todo["text"] == "Ship it"
        assert todo["completed"] is False
        assert _data(client.get("/api/todos")) == [todo]

    def test_invalid_text_is_400(self, client):
        response = client.post("/api/todos", json={"text": ""})
        assert response.status_code == 400
        assert response.get_json() == {"ok": False, "error": "Please enter a task description"}

    def test_patch_merges(self, client):
        todo = _data(client.post("/api/todos", json={"text": "a"}))
        updated = _data(client.patch(f"/api/todos/{todo['id']}", json={"completed": True}))
        assert updated["completed"] is True
        assert updated["text"] == "a"

    def test_patch_ignores_wrongly_typed_fields(self, client):
        todo = _data(client.post("/api/todos", json={"text": "a"}))
        updated = _data(client.patch(f"/api/todos/{todo['id']}", json={"completed": "yes", "text": 5}))
        assert updated == todo

    def test_patch_trims_text(self, client):
        todo = _data(client.post("/api/todos", json={"text": "a"}))
        updated = _data(client.patch(f"/api/todos/{todo['id']}", json={"text": " new "}))
        assert updated["text"] == "new"

    def test_patch_rejects_empty_or_long_text(self, client):
        todo = _data(client.post("/api/todos", json={"text": "a"}))
        for text in ("", "   ", "x" * 101):
            response = client.patch(f"/api/todos/{todo['id']}", json={"text": text})
            assert response.status_code == 400
            assert response.get_json()["ok"] is False
        assert _data(client.get("/api/todos")) == [todo]

    def test_patch_missing_returns_null(self, client):
        assert _data(client.patch("/api/todos/999", json={"completed": True})) is None

    def test_delete(self, client):
        todo = _data(client.post("/api/todos", json={"text": "a"}))
        client.delete(f"/api/todos/{todo['id']}")
        assert _data(client.get("/api/todos")) == []


# ---------------------------------------------------------------------------
# Sessions and stats
# ---------------------------------------------------------------------------


class TestSessions:
    def test_create_defaults(self, client):
        session = _data(client.post("/api/sessions", json={}))
        assert session["type"] == "focus"
        assert session["minutes"] == 0
        assert session["date"]

    def test_malformed_minutes_coerced_to_zero(self, client):
        session = _data(client.post("/api/sessions", json={"type": "timer", "minutes": "lots"}))
        assert session["type"] == "timer"
        assert session["minutes"] == 0

    def test_sessions_appended(self, client):
        client.post("/api/sessions", json={"minutes": 10})
        client.post("/api/sessions", json={"minutes": 20})
        assert [s["minutes"] for s in _data(client.get("/api/sessions"))] == [10, 20]

    def test_weekly_stats(self, client):
        client.post("/api/sessions", json={"minutes": 25})
        client.post("/api/sessions", json={"minutes": 20})

        stats = _data(client.get("/api/stats/weekly"))
        assert len(stats["byDay"]) == 7
        assert stats["byDay"][-1] == {"date": date.today().isoformat(), "minutes": 45}
        assert stats["totalMinutes"] == 45

    def test_streak(self, client):
        client.post("/api/sessions", json={"minutes": 5})
        assert _data(client.get("/api/stats/streak")) == {"current": 1, "longest": 1}


def test_uses_given_repositories():
    context = StorageStrategyContext(LocalStorageStrategy.in_memory())
    context.todo_repository.add("preloaded")

    client = create_app(context).test_client()
    todos = _data(client.get("/api/todos"))
    assert [t["text"] for t in todos] == ["preloaded"]
