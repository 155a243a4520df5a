"""Shared httpx.AsyncClient for outbound calls to PFIs and the issuer.

One connection pool per process, created at app startup and closed at
shutdown.

Usage:
    from pfi_negotiator.infrastructure.http_client import get_http_client

    http = get_http_client()
    response = await http.get("http://localhost:9000/vc")
"""

from __future__ import annotations

import httpx

from pfi_negotiator.config import get_settings
from pfi_negotiator.logging_config import get_logger

logger = get_logger(__name__)

_http_client: httpx.AsyncClient | None = None


async def init_http_client() -> httpx.AsyncClient:
    """Create the shared client. Called during app startup."""
    global _http_client
    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        follow_redirects=True,
    )
    logger.info("http_client.created", timeout=settings.http_timeout_seconds)
    return _http_client


def get_http_client() -> httpx.AsyncClient:
    """Return the shared client. Must call init_http_client() first."""
    if _http_client is None:
        raise RuntimeError("HTTP client not initialized. Call init_http_client() first.")
    return _http_client


def is_http_client_ready() -> bool:
    return _http_client is not None and not _http_client.is_closed


async def close_http_client() -> None:
    """Close the shared client. Called during app shutdown."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        logger.info("http_client.closed")
        _http_client = None
