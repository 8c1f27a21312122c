"""Configuration loading: telefy.yml settings and the environment snapshot."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import dotenv_values, find_dotenv

from telefy.errors import ConfigError
from telefy.models import DEFAULT_API_URL, ParseMode


DEFAULT_CONFIG_FILE = "telefy.yml"


@dataclass
class TelefyConfig:
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    parse_mode: str = ParseMode.MARKDOWN.value
    channel: str | None = None  # Default selector when the CLI gets none
    env_file: str | None = None


def load_config(config_path: str | Path | None = None) -> TelefyConfig:
    """Load config from telefy.yml, falling back to defaults."""
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return TelefyConfig()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Invalid config file {config_path}: expected a mapping of settings",
            "Use key: value pairs such as api_url, timeout, parse_mode, channel, env_file.",
        )

    env_file = raw.get("env_file")
    if env_file:
        env_file = os.path.expanduser(str(env_file))

    try:
        timeout = float(raw.get("timeout", 10.0))
    except (TypeError, ValueError):
        raise ConfigError(
            f"Invalid timeout in {config_path}: {raw.get('timeout')}",
            "Set timeout to a number of seconds.",
        ) from None

    channel = raw.get("channel")
    return TelefyConfig(
        api_url=str(raw.get("api_url", DEFAULT_API_URL)).rstrip("/"),
        timeout=timeout,
        parse_mode=str(raw.get("parse_mode", ParseMode.MARKDOWN.value)),
        channel=str(channel) if channel else None,
        env_file=env_file,
    )


def load_environment(env_file: str | Path | None = None) -> dict[str, str]:
    """Snapshot of the process environment plus any .env values it lacks.

    Process variables come first and win over the .env file; .env-only keys
    follow in file order.
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)

    snapshot: dict[str, str] = dict(os.environ)
    if env_file:
        for key, value in dotenv_values(env_file).items():
            if value is not None and key not in snapshot:
                snapshot[key] = value
    return snapshot
