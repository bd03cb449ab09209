"""aiohttp session helpers for talking to the container engine."""

from typing import Any

import aiohttp

from ..exceptions import ImageListError
from .types import EngineConfig

UNIX_SCHEME = "unix://"
TCP_SCHEME = "tcp://"

# Host used in request URLs when the transport is a unix socket
UNIX_BASE_URL = "http://localhost"


def resolve_base_url(config: EngineConfig) -> str:
    """Map an engine host (unix://, tcp://, http://) to an HTTP base URL."""
    url = config.url.rstrip("/")
    if url.startswith(UNIX_SCHEME):
        base = UNIX_BASE_URL
    elif url.startswith(TCP_SCHEME):
        base = "http://" + url[len(TCP_SCHEME) :]
    else:
        base = url

    if config.api_version:
        base = f"{base}/v{config.api_version}"
    return base


def socket_path(config: EngineConfig) -> str | None:
    """Return the unix socket path, or None for network hosts."""
    if config.url.startswith(UNIX_SCHEME):
        return config.url[len(UNIX_SCHEME) :]
    return None


async def create_session(config: EngineConfig | None = None) -> aiohttp.ClientSession:
    """Create a client session for the configured engine transport."""
    config = config or EngineConfig()
    path = socket_path(config)
    connector = aiohttp.UnixConnector(path=path) if path else None
    return aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=config.timeout),
    )


async def parse_json_response(resp: aiohttp.ClientResponse) -> Any:
    """Return the JSON body of a successful response.

    Raises:
        ImageListError: If the engine answered with an error status or a
            body that is not JSON
    """
    if resp.status >= 400:
        message = await error_message(resp)
        raise ImageListError(
            f"Engine returned {resp.status}: {message}", status=resp.status
        )
    try:
        return await resp.json(content_type=None)
    except ValueError as e:
        raise ImageListError(
            f"Invalid engine response: {e}", status=resp.status
        ) from e


async def error_message(resp: aiohttp.ClientResponse) -> str:
    """Extract the engine's error message from a failed response."""
    text = await resp.text()
    try:
        body = await resp.json(content_type=None)
    except ValueError:
        return text.strip() or resp.reason or ""
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return text.strip() or resp.reason or ""
