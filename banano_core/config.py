"""
TOML-based configuration for banano_core.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Example ``banano.toml``::

    [crypto]
    curve = "ecdsa"

    [logging]
    level = "DEBUG"
    format = "json"

Usage:
    from banano_core.config import load_config
    cfg = load_config("banano.toml")
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_CURVE = "sodium"


@dataclass
class CryptoConfig:
    """Ed25519 backend selection ("sodium" or "ecdsa")."""
    curve: str = DEFAULT_CURVE


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class BananoConfig:
    """Top-level configuration container."""
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def default_curve_name() -> str:
    """Backend used when a caller does not pick one (``BANANO_CURVE`` or sodium)."""
    return os.environ.get("BANANO_CURVE", "").strip().lower() or DEFAULT_CURVE


def load_config(path: str | None = None) -> BananoConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    A missing file is not an error; a malformed one raises
    ``tomllib.TOMLDecodeError``.

    Env-var mapping:
        BANANO_CURVE      -> crypto.curve
        BANANO_LOG_LEVEL  -> logging.level
        BANANO_LOG_FMT    -> logging.format
        BANANO_LOG_FILE   -> logging.file
    """
    cfg = BananoConfig()

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("crypto", cfg.crypto),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    if v := os.environ.get("BANANO_CURVE"):
        cfg.crypto.curve = v.strip().lower()
    if v := os.environ.get("BANANO_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("BANANO_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("BANANO_LOG_FILE"):
        cfg.logging.file = v

    return cfg
