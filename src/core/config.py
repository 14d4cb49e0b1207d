"""Pydantic settings loaded from YAML configuration and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, SecretStr, field_validator

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")

# Environment variable → (section, key) in the settings tree.
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "CACHET_BASE_URL": ("cachet", "base_url"),
    "CACHET_AUTH_TOKEN": ("cachet", "auth_token"),
    "BIND_ADDRESS": ("server", "bind_address"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FORMAT": ("logging", "format"),
    "RESOLUTION_POLICY": ("aggregation", "resolution_policy"),
}


class ResolutionPolicy(StrEnum):
    """Which status field decides whether an alert counts as resolved."""

    ALERT = "alert"  # each alert's own status
    BATCH = "batch"  # the group-level status, applied to every alert


class CachetConfig(BaseModel):
    """Cachet status API configuration."""

    base_url: str = "http://localhost:8000"
    auth_token: SecretStr = SecretStr("")
    timeout_secs: float = 10.0

    @property
    def fallback_token(self) -> str | None:
        token = self.auth_token.get_secret_value()
        return token or None


class ServerConfig(BaseModel):
    """Inbound webhook server configuration."""

    bind_address: str = "0.0.0.0:8888"

    @field_validator("bind_address")
    @classmethod
    def _check_bind_address(cls, value: str) -> str:
        host, sep, port = value.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"bind address must look like host:port, got {value!r}")
        return value

    @property
    def host(self) -> str:
        return self.bind_address.rpartition(":")[0].strip("[]")

    @property
    def port(self) -> int:
        return int(self.bind_address.rpartition(":")[2])


class AggregationConfig(BaseModel):
    """Severity aggregation configuration."""

    resolution_policy: ResolutionPolicy = ResolutionPolicy.ALERT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "console"


class Settings(BaseModel):
    """Root settings container."""

    cachet: CachetConfig = CachetConfig()
    server: ServerConfig = ServerConfig()
    aggregation: AggregationConfig = AggregationConfig()
    logging: LoggingConfig = LoggingConfig()


def _apply_env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> None:
    for var, (section, key) in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value is None:
            continue
        target = data.get(section)
        if not isinstance(target, dict):
            target = {}
            data[section] = target
        target[key] = value


def load_settings(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from a YAML file and apply env overrides.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.
        env: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Parsed Settings instance.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    _apply_env_overrides(data, os.environ if env is None else env)

    return Settings(**data)
