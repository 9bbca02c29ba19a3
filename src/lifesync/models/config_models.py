"""Configuration models.

The whole configuration is one JSON document validated by ``AppConfig``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Where todos, notes and sessions live."""

    backend: Literal["local", "remote"] = Field(
        default="local", description="local JSON file or the LifeSync server"
    )
    path: str | None = Field(
        default=None, description="Storage file for the local backend"
    )


class ServerConfig(BaseModel):
    """HTTP server and client settings."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=4000)
    url: str = Field(default="http://localhost:4000")
    timeout: int = Field(default=10)
    retry: int = Field(default=3)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the server URL is not empty."""
        if not v or not v.strip():
            raise ValueError("url cannot be empty")
        return v.strip()


class ClockConfig(BaseModel):
    """Clock display settings."""

    format: Literal["24h", "12h"] = Field(default="24h")


class TimerConfig(BaseModel):
    """Countdown defaults."""

    default_minutes: int = Field(default=25, ge=0, le=60)
    default_seconds: int = Field(default=0, ge=0, le=59)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")


class AppConfig(BaseModel):
    """Main LifeSync configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    timer: TimerConfig = Field(default_factory=TimerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
