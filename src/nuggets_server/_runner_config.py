# Area: Shared
"""
nuggets_server._runner_config - Server configuration
====================================================

Configuration model, defaults and loading for ServerRunner.
Values come from defaults, an optional JSON file, the environment
(including a .env file) and finally command-line overrides.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .errors import UsageError

logger = logging.getLogger("nuggets_server")

# Letters A..Z limit the roster
MAX_LETTERS = 26

# Largest payload a single UDP datagram can carry
MAX_DATAGRAM_BYTES = 65507

# Environment variable -> config key
ENV_MAPPINGS = {
    "NUGGETS_HOST": "host",
    "NUGGETS_PORT": "port",
    "NUGGETS_GOLD_TOTAL": "gold_total",
    "NUGGETS_MAX_PLAYERS": "max_players",
    "NUGGETS_LOG_FILE": "log_file",
    "NUGGETS_TRACE": "trace",
}


class ServerConfig(BaseModel):
    """Tunable constants of one game session and its server process."""

    gold_total: int = 250
    gold_min_piles: int = 10
    gold_max_piles: int = 30
    max_players: int = MAX_LETTERS
    max_name_length: int = 50
    host: str = "0.0.0.0"
    port: int = 0
    log_file: str = "nuggets_server.log"
    trace: bool = False
    receive_timeout_seconds: float = 0.5

    @field_validator("gold_total", "gold_min_piles", "max_name_length")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("max_players")
    @classmethod
    def _letter_capacity(cls, value: int) -> int:
        if not 1 <= value <= MAX_LETTERS:
            raise ValueError(f"must be between 1 and {MAX_LETTERS}")
        return value

    @field_validator("port")
    @classmethod
    def _port_range(cls, value: int) -> int:
        if not 0 <= value <= 65535:
            raise ValueError("must be between 0 and 65535")
        return value

    @model_validator(mode="after")
    def _pile_range(self) -> "ServerConfig":
        if self.gold_min_piles > self.gold_max_piles:
            raise ValueError("gold_min_piles must not exceed gold_max_piles")
        return self


def read_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Read a JSON config file; a missing path yields an empty dict."""
    if not config_path:
        return {}
    path = Path(config_path)
    if not path.exists():
        raise UsageError(f"config file {config_path} does not exist")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise UsageError(f"config file {config_path} could not be read: {e}")
    if not isinstance(data, dict):
        raise UsageError(f"config file {config_path} must contain a JSON object")
    return data


def read_environment() -> Dict[str, Any]:
    """Collect config overrides from NUGGETS_* variables (and .env)."""
    load_dotenv()
    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]
    if "trace" in values:
        values["trace"] = str(values["trace"]).lower() in ("true", "1", "yes")
    return values


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ServerConfig:
    """
    Build a validated ServerConfig.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values from the command line (None entries ignored)

    Raises:
        UsageError: If a value fails validation
    """
    merged: Dict[str, Any] = {}
    merged.update(read_config_file(config_path))
    merged.update(read_environment())
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})
    config = validate_config(merged)
    logger.debug(f"Configuration loaded: {config.model_dump()}")
    return config


def validate_config(values: Dict[str, Any]) -> ServerConfig:
    """Validate raw config values, converting pydantic errors to UsageError."""
    try:
        return ServerConfig(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise UsageError(f"invalid configuration: {problems}")
