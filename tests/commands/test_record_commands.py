"""Tests for the todos, notes and sessions commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from lifesync.main import app
from lifesync.services.config_service import get_storage_strategy_context

runner = CliRunner()


def _todos():
    return get_storage_strategy_context().todo_repository


# ---------------------------------------------------------------------------
# Todos
# ---------------------------------------------------------------------------


class TestTodos:
    def test_empty_list(self):
        result = runner.invoke(app, ["todos", "list"])
        assert result.exit_code == 0
        assert "No tasks yet" in result.output

    def test_add_joins_words(self):
        result = runner.invoke(app, ["todos", "add", "write", "the", "report"])
        assert result.exit_code == 0
        assert [t.text for t in _todos().list()] == ["write the report"]

    def test_add_persists_to_storage_file(self, tmp_config):
        runner.invoke(app, ["todos", "add", "persist me"])
        assert "persist me" in tmp_config.storage_path.read_text()

    def test_add_too_long_exits_with_invalid_args(self):
        result = runner.invoke(app, ["todos", "add", "x" * 101])
        assert result.exit_code == 2
        assert "less than 100" in result.output
        assert _todos().list() == []

    def test_add_blank_rejected(self):
        result = runner.invoke(app, ["todos", "add", "   "])
        assert result.exit_code == 2

    def test_list_json(self):
        runner.invoke(app, ["todos", "add", "a"])
        result = runner.invoke(app, ["todos", "list", "--output", "json"])
        data = json.loads(result.output)
        assert data[0]["text"] == "a"
        assert data[0]["completed"] is False
        assert "createdAt" in data[0]

    def test_list_pretty_counts(self):
        runner.invoke(app, ["todos", "add", "a"])
        result = runner.invoke(app, ["todos", "list"])
        assert "1 pending" in result.output

    def test_done_and_undo(self):
        todo = _todos().add("a")
        result = runner.invoke(app, ["todos", "done", str(todo.id)])
        assert result.exit_code == 0
        assert _todos().list()[0].completed is True

        runner.invoke(app, ["todos", "undo", str(todo.id)])
        assert _todos().list()[0].completed is False

    def test_toggle(self):
        todo = _todos().add("a")
        runner.invoke(app, ["todos", "toggle", str(todo.id)])
        assert _todos().list()[0].completed is True

    def test_done_unknown_id_exits_not_found(self):
        result = runner.invoke(app, ["todos", "done", "12345"])
        assert result.exit_code == 5
        assert "not found" in result.output

    def test_delete(self):
        todo = _todos().add("a")
        runner.invoke(app, ["todos", "delete", str(todo.id)])
        assert _todos().list() == []

    def test_clear_completed(self):
        a = _todos().add("a")
        _todos().add("b")
        _todos().toggle(a.id)

        result = runner.invoke(app, ["todos", "clear-completed"])
        assert result.exit_code == 0
        assert "Cleared 1 completed task" in result.output
        assert [t.text for t in _todos().list()] == ["b"]

    def test_clear_completed_with_nothing_done(self):
        result = runner.invoke(app, ["todos", "clear-completed"])
        assert "No completed tasks" in result.output


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


class TestNotes:
    def test_add_and_list_newest_first(self):
        runner.invoke(app, ["notes", "add", "first"])
        runner.invoke(app, ["notes", "add", "second"])
        result = runner.invoke(app, ["notes", "list", "-o", "json"])
        assert [n["text"] for n in json.loads(result.output)] == ["second", "first"]

    def test_blank_note_rejected(self):
        result = runner.invoke(app, ["notes", "add", " "])
        assert result.exit_code == 2

    def test_delete(self):
        note = get_storage_strategy_context().note_repository.add("x")
        runner.invoke(app, ["notes", "delete", str(note.id)])
        assert get_storage_strategy_context().note_repository.list() == []

    def test_clear_with_yes(self):
        get_storage_strategy_context().note_repository.add("x")
        result = runner.invoke(app, ["notes", "clear", "--yes"])
        assert result.exit_code == 0
        assert get_storage_strategy_context().note_repository.list() == []

    def test_clear_cancelled(self):
        get_storage_strategy_context().note_repository.add("x")
        result = runner.invoke(app, ["notes", "clear"], input="n\n")
        assert "Cancelled" in result.output
        assert len(get_storage_strategy_context().note_repository.list()) == 1

    def test_empty_list(self):
        result = runner.invoke(app, ["notes", "list"])
        assert "No notes yet" in result.output


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


class TestSessions:
    def test_log_and_list(self):
        result = runner.invoke(app, ["sessions", "log", "25"])
        assert result.exit_code == 0
        assert "Logged 25 minute focus session" in result.output

        listed = json.loads(runner.invoke(app, ["sessions", "list", "-o", "json"]).output)
        assert listed[0]["minutes"] == 25
        assert listed[0]["type"] == "focus"

    def test_log_fractional_minutes_with_type(self):
        runner.invoke(app, ["sessions", "log", "12.5", "--type", "timer"])
        session = get_storage_strategy_context().session_repository.list()[0]
        assert session.minutes == 12.5
        assert session.type == "timer"

    def test_negative_minutes_rejected_by_cli(self):
        result = runner.invoke(app, ["sessions", "log", "--", "-5"])
        assert result.exit_code != 0

    def test_list_limit_keeps_most_recent(self):
        for minutes in (1, 2, 3):
            runner.invoke(app, ["sessions", "log", str(minutes)])
        result = runner.invoke(app, ["sessions", "list", "-n", "2", "-o", "json"])
        assert [s["minutes"] for s in json.loads(result.output)] == [2, 3]

    @pytest.mark.parametrize("output", ["pretty", "table", "yaml"])
    def test_list_formats(self, output):
        runner.invoke(app, ["sessions", "log", "10"])
        result = runner.invoke(app, ["sessions", "list", "-o", output])
        assert result.exit_code == 0

    def test_empty_list(self):
        result = runner.invoke(app, ["sessions", "list"])
        assert "No sessions logged yet" in result.output
