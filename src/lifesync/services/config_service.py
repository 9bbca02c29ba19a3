"""Configuration service for the LifeSync CLI.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json (created with defaults on first run)
- Dotted-key get/set/reset for the ``config`` command
- Building the storage strategy the configuration asks for
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from lifesync.models.config_models import AppConfig
from lifesync.models.exceptions import ValidationError
from lifesync.models.storage_strategy import (
    LocalStorageStrategy,
    RemoteStorageStrategy,
    StorageStrategyContext,
)

_APP_NAME = "lifesync"
STORAGE_FILE = "storage.json"


class ConfigService:
    """Service for loading, saving and querying the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None
        self._storage_strategy_context: StorageStrategyContext | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def storage_path(self) -> Path:
        """File backing the local key-value store."""
        configured = self.config.storage.path
        return Path(configured).expanduser() if configured else self.data_dir / STORAGE_FILE

    @property
    def storage_strategy_context(self) -> StorageStrategyContext:
        """Get a StorageStrategyContext based on the current configuration."""
        if self._storage_strategy_context is None:
            self._storage_strategy_context = StorageStrategyContext(self._build_strategy())
        return self._storage_strategy_context

    def _build_strategy(self):
        from lifesync.adapters.file_store import JsonFileStore

        if self.config.storage.backend == "remote":
            server = self.config.server
            return RemoteStorageStrategy(
                base_url=server.url,
                preferences_store=JsonFileStore(self.storage_path),
                timeout=server.timeout,
                retry=server.retry,
            )
        return LocalStorageStrategy.from_path(self.storage_path)

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: write the defaults so users can find and edit them
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self, key: str | None = None):
        """Reset one setting, or the whole configuration, to defaults."""
        if key is not None:
            if not self.has_key(key):
                raise ValidationError(f"Unknown configuration key '{key}'")
            default: Any = AppConfig()
            for k in key.split("."):
                default = getattr(default, k)
            self.set(key, default)
            return

        self._config = AppConfig()
        self._storage_strategy_context = None
        self.save_config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key; None if unknown."""
        value: Any = self.config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def has_key(self, key: str) -> bool:
        """Whether *key* names a leaf setting."""
        model: Any = AppConfig
        for k in key.split("."):
            if not (isinstance(model, type) and issubclass(model, BaseModel)):
                return False
            field = model.model_fields.get(k)
            if field is None:
                return False
            model = field.annotation
        return not (isinstance(model, type) and issubclass(model, BaseModel))

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            ValidationError: If the key is unknown or the value is rejected
        """
        if not self.has_key(key):
            raise ValidationError(f"Unknown configuration key '{key}'")

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except PydanticValidationError as e:
            first = e.errors()[0]
            raise ValidationError(f"Invalid value for '{key}': {first['msg']}") from e

        self._storage_strategy_context = None
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service


def get_storage_strategy_context() -> StorageStrategyContext:
    """Get a StorageStrategyContext based on the current configuration."""
    return get_config_service().storage_strategy_context
