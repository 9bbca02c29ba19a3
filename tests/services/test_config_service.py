"""Tests for ConfigService."""

from __future__ import annotations

import json
import os

import pytest

from lifesync.models import ValidationError
from lifesync.models.config_models import AppConfig
from lifesync.services.config_service import (
    ConfigService,
    get_config_service,
    get_storage_strategy_context,
)


class TestLoadSave:
    def test_first_run_writes_defaults(self, tmp_config):
        assert tmp_config.config_path.exists()
        saved = json.loads(tmp_config.config_path.read_text())
        assert saved["server"]["port"] == 4000
        assert saved["timer"]["default_minutes"] == 25

    def test_config_file_is_private(self, tmp_config):
        if os.name == "posix":
            assert tmp_config.config_path.stat().st_mode & 0o777 == 0o600

    def test_existing_file_is_loaded(self, tmp_config):
        tmp_config.set("clock.format", "12h")
        fresh = ConfigService()
        assert fresh.config.clock.format == "12h"

    def test_invalid_file_raises(self, tmp_config):
        tmp_config.config_path.write_text("{broken")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            ConfigService().load_config()

    def test_cached_service(self):
        assert get_config_service() is get_config_service()


class TestGetSet:
    def test_get_dotted_key(self, tmp_config):
        assert tmp_config.get("server.url") == "http://localhost:4000"
        assert tmp_config.get("timer.default_minutes") == 25

    def test_get_unknown_key_is_none(self, tmp_config):
        assert tmp_config.get("server.nope") is None
        assert tmp_config.get("nope") is None

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("server.port", True), ("server", False), ("server.port.x", False), ("bogus", False)],
    )
    def test_has_key(self, tmp_config, key, expected):
        assert tmp_config.has_key(key) is expected

    def test_set_persists(self, tmp_config):
        tmp_config.set("timer.default_minutes", 50)
        saved = json.loads(tmp_config.config_path.read_text())
        assert saved["timer"]["default_minutes"] == 50

    def test_set_unknown_key_raises(self, tmp_config):
        with pytest.raises(ValidationError, match="Unknown configuration key"):
            tmp_config.set("server.colour", "blue")

    def test_set_invalid_value_raises_and_keeps_old(self, tmp_config):
        with pytest.raises(ValidationError, match="Invalid value"):
            tmp_config.set("timer.default_minutes", 99)
        assert tmp_config.get("timer.default_minutes") == 25

    def test_set_invalid_literal(self, tmp_config):
        with pytest.raises(ValidationError):
            tmp_config.set("storage.backend", "cloud")


class TestReset:
    def test_reset_everything(self, tmp_config):
        tmp_config.set("clock.format", "12h")
        tmp_config.set("server.port", 5000)
        tmp_config.reset_config()
        assert tmp_config.config == AppConfig()

    def test_reset_single_key(self, tmp_config):
        tmp_config.set("clock.format", "12h")
        tmp_config.set("server.port", 5000)
        tmp_config.reset_config("server.port")
        assert tmp_config.get("server.port") == 4000
        assert tmp_config.get("clock.format") == "12h"

    def test_reset_unknown_key(self, tmp_config):
        with pytest.raises(ValidationError):
            tmp_config.reset_config("what.ever")


class TestStorage:
    def test_default_storage_path_in_data_dir(self, tmp_config):
        assert tmp_config.storage_path == tmp_config.data_dir / "storage.json"

    def test_custom_storage_path(self, tmp_config, tmp_path):
        tmp_config.set("storage.path", str(tmp_path / "elsewhere.json"))
        assert tmp_config.storage_path == tmp_path / "elsewhere.json"

    def test_local_strategy_by_default(self, tmp_config):
        context = get_storage_strategy_context()
        assert context.storage_type == "local"
        context.todo_repository.add("persisted")
        assert tmp_config.storage_path.exists()

    def test_remote_strategy_when_configured(self, tmp_config):
        tmp_config.set("storage.backend", "remote")
        assert get_storage_strategy_context().storage_type == "remote"

    def test_changing_settings_rebuilds_strategy(self, tmp_config):
        first = tmp_config.storage_strategy_context
        tmp_config.set("clock.format", "12h")
        assert tmp_config.storage_strategy_context is not first
