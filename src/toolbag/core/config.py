"""Configuration management for toolbag."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from loguru import logger

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class JsonConfig:
    """JSON codec configuration."""

    # Maximum nesting depth accepted when decoding
    max_depth: int = 512
    # Emit null for values the encoder cannot represent instead of failing
    partial_output: bool = True
    ensure_ascii: bool = False


@dataclass
class TimeConfig:
    """Formats used when rendering past dates."""

    date_format: str = "%d/%m/%Y"
    datetime_format: str = "%d/%m/%Y %H:%M"


@dataclass
class Config:
    """Main library configuration."""

    json: JsonConfig = field(default_factory=JsonConfig)
    time: TimeConfig = field(default_factory=TimeConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to a TOML file with optional ``[json]`` and ``[time]``
                tables.

        Returns:
            Config with file values and environment overrides applied.
        """
        path = Path(path)
        with path.open("rb") as fd:
            data = tomllib.load(fd)

        logger.debug(f"Loaded config file: {path}")

        config = cls()
        _update_section(config.json, data.get("json", {}))
        _update_section(config.time, data.get("time", {}))
        return config._apply_env()

    @classmethod
    def from_env_or_file(cls, path: str | Path | None = None) -> "Config":
        """Load from ``path`` or ``TOOLBAG_CONFIG`` if set, else from env only."""
        if path is None:
            path = os.environ.get("TOOLBAG_CONFIG") or None
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> "Config":
        if depth := os.environ.get("TOOLBAG_JSON_MAX_DEPTH"):
            self.json.max_depth = int(depth)
        if (partial := os.environ.get("TOOLBAG_JSON_PARTIAL_OUTPUT")) is not None:
            self.json.partial_output = partial.strip().lower() in _TRUTHY
        if (ascii_only := os.environ.get("TOOLBAG_JSON_ENSURE_ASCII")) is not None:
            self.json.ensure_ascii = ascii_only.strip().lower() in _TRUTHY

        if date_format := os.environ.get("TOOLBAG_DATE_FORMAT"):
            self.time.date_format = date_format
        if datetime_format := os.environ.get("TOOLBAG_DATETIME_FORMAT"):
            self.time.datetime_format = datetime_format

        return self


def _update_section(section: Any, values: dict[str, Any]) -> None:
    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key in known:
            setattr(section, key, value)
        else:
            logger.warning(f"Ignoring unknown config key: {key!r}")
