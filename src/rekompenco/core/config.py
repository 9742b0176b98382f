"""Rekompenco configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rekompenco.core.exceptions import ConfigError, ConfigNotFoundError
from rekompenco.core.paths import default_config_path, default_store_path

# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class StoreConfig(BaseModel):
    path: str = ""  # empty → platform default


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "text"  # "text" | "json"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {sorted(allowed)}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class RekompencoConfig(BaseModel):
    """Root Rekompenco configuration model."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Computed paths (not stored in config file)
    _config_path: Path | None = None

    @property
    def store_path(self) -> Path:
        if self.store.path:
            return Path(self.store.path).expanduser()
        return default_store_path()

    @property
    def config_path(self) -> Path | None:
        return self._config_path


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def _config_file_path() -> Path:
    if env_path := os.environ.get("REKOMPENCO_CONFIG"):
        return Path(env_path)
    return default_config_path()


def load_config(path: Path | None = None) -> RekompencoConfig:
    """
    Load RekompencoConfig from TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (REKOMPENCO_*)
      2. Config file (<app-data>/Rekompenco/config.toml)
      3. Built-in defaults

    A missing default config file is not an error; a missing file that was
    asked for explicitly (argument or REKOMPENCO_CONFIG) is.
    """
    import tomllib

    explicit = path is not None or bool(os.environ.get("REKOMPENCO_CONFIG"))
    cfg_path = path or _config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc
    elif explicit:
        raise ConfigNotFoundError(f"Config file not found: {cfg_path}")

    _apply_env_overrides(data)

    try:
        config = RekompencoConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc

    if cfg_path.exists():
        config._config_path = cfg_path
    return config


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay REKOMPENCO_* environment variables onto the parsed TOML data."""
    if store_path := os.environ.get("REKOMPENCO_STORE_PATH"):
        data.setdefault("store", {})["path"] = store_path
    if level := os.environ.get("REKOMPENCO_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to TOML file."""
    import tomli_w

    cfg_path = path or _config_file_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.replace(cfg_path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    return cfg_path


def default_config_data() -> dict[str, Any]:
    """Return the default config as a plain dict, ready for ``save_config``."""
    return RekompencoConfig().model_dump()
