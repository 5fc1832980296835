"""Client settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``ZKSYNC_``, nested via ``__``)
2. YAML config file (``ZKSYNC_CONFIG_PATH`` env var or ``ClientConfig.from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class Network(enum.StrEnum):
    """Rollup deployments with a well-known endpoint."""

    LOCALHOST = "localhost"
    ROPSTEN = "ropsten"
    RINKEBY = "rinkeby"
    MAINNET = "mainnet"


class TransportKind(enum.StrEnum):
    """Transport style: push-capable websocket or plain HTTP."""

    WS = "WS"
    HTTP = "HTTP"


# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class HTTPConfig(BaseSettings):
    """HTTP transport settings."""

    model_config = SettingsConfigDict(
        env_prefix="ZKSYNC_HTTP__",
        case_sensitive=False,
    )

    timeout: float = Field(default=30.0, description="Per-request timeout in seconds")


class WSConfig(BaseSettings):
    """WebSocket transport settings."""

    model_config = SettingsConfigDict(
        env_prefix="ZKSYNC_WS__",
        case_sensitive=False,
    )

    open_timeout: float = 10.0
    ping_interval: float | None = 20.0
    ping_timeout: float | None = 20.0


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class ClientConfig(BaseSettings):
    """Top-level client configuration.

    Loads settings from environment variables (``ZKSYNC_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZKSYNC_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    network: Network = Network.LOCALHOST
    transport: TransportKind = TransportKind.WS
    poll_interval: float = Field(
        default=3.0,
        gt=0,
        description="Seconds between receipt polls when subscriptions are unavailable",
    )
    config_path: str = ""

    http: HTTPConfig = Field(default_factory=HTTPConfig)
    ws: WSConfig = Field(default_factory=WSConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``ClientConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
