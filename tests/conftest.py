"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: every
test gets its own config, data and log directories under *tmp_path*.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from lifesync.models.clock.ticker import ManualTicker
from lifesync.models.storage_strategy import LocalStorageStrategy, StorageStrategyContext


# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* and give each test a fresh ConfigService."""
    from lifesync.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    with patch("lifesync.services.config_service.user_config_dir", return_value=str(config_dir)):
        with patch("lifesync.services.config_service.user_data_dir", return_value=str(data_dir)):
            with patch("lifesync.utils.logger.user_log_dir", return_value=str(log_dir)):
                yield tmp_path
    get_config_service.cache_clear()


@pytest.fixture()
def tmp_config():
    """A real ConfigService backed by the isolated directories."""
    from lifesync.services.config_service import get_config_service

    return get_config_service()


# ---------------------------------------------------------------------------
# Repositories and tickers
# ---------------------------------------------------------------------------


@pytest.fixture()
def memory_context() -> StorageStrategyContext:
    """Repositories over a fresh in-memory key-value store."""
    return StorageStrategyContext(LocalStorageStrategy.in_memory())


@pytest.fixture()
def manual_ticker() -> ManualTicker:
    return ManualTicker(interval=1.0)
