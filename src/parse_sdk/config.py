"""Client configuration and the process-wide credentials holder."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .constants import API_ENDPOINT, API_VERSION, HEADER_APPLICATION_ID, HEADER_CLIENT_KEY


@dataclass(frozen=True)
class ClientConfig:
    application_id: str
    client_key: str
    api_endpoint: str = API_ENDPOINT
    api_version: str = API_VERSION
    timeout: float = 10.0
    user_agent: str = "parse-sdk-python/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            application_id=os.environ.get("PARSE_APPLICATION_ID", ""),
            client_key=os.environ.get("PARSE_CLIENT_KEY", ""),
            api_endpoint=os.environ.get("PARSE_API_ENDPOINT", API_ENDPOINT).rstrip("/"),
            api_version=os.environ.get("PARSE_API_VERSION", API_VERSION),
            timeout=float(os.environ.get("PARSE_TIMEOUT", "10.0")),
        )

    def api_url(self, endpoint: Optional[str] = None) -> str:
        return f"{self.api_endpoint}/{self.api_version}/{endpoint or ''}"

    def auth_headers(self) -> Dict[str, str]:
        headers = {
            HEADER_APPLICATION_ID: self.application_id,
            HEADER_CLIENT_KEY: self.client_key,
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }
        headers.update(self.headers)
        return headers


# Swapped as a whole on initialize(); readers never see half of an update.
_active: Optional[ClientConfig] = None


def initialize(application_id: str, client_key: str, **overrides: Any) -> ClientConfig:
    """Authenticate this process as belonging to a Parse application.

    Must be called once before any request is sent. Calling it again replaces
    the previous credentials. Extra keyword arguments override the remaining
    :class:`ClientConfig` fields.
    """
    global _active
    config = ClientConfig(application_id=application_id, client_key=client_key)
    if overrides:
        config = replace(config, **overrides)
    _active = config
    return config


def get_config() -> Optional[ClientConfig]:
    return _active


def get_application_id() -> Optional[str]:
    """Return the application id if one has been set, otherwise ``None``."""
    config = _active
    return config.application_id if config is not None else None


def get_client_key() -> Optional[str]:
    """Return the client key if one has been set, otherwise ``None``."""
    config = _active
    return config.client_key if config is not None else None


def get_api_url(endpoint: Optional[str] = None) -> str:
    config = _active
    if config is None:
        return f"{API_ENDPOINT}/{API_VERSION}/{endpoint or ''}"
    return config.api_url(endpoint)


__all__ = [
    "ClientConfig",
    "get_api_url",
    "get_application_id",
    "get_client_key",
    "get_config",
    "initialize",
]
