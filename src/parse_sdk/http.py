"""HTTP client construction for the Parse REST API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import ClientConfig, get_config
from .exceptions import NOT_INITIALIZED, ParseError

logger = logging.getLogger(__name__)


def create_http_client(
    config: Optional[ClientConfig] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Build an ``httpx.Client`` that authenticates every request.

    Uses the process-wide configuration when ``config`` is not given.
    """
    config = config or get_config()
    if config is None:
        raise ParseError(NOT_INITIALIZED, "initialize() must be called before sending requests")
    logger.debug("Creating HTTP client for %s", config.api_url())
    return httpx.Client(
        base_url=config.api_url(),
        headers=config.auth_headers(),
        timeout=config.timeout,
        transport=transport,
    )


__all__ = ["create_http_client"]
