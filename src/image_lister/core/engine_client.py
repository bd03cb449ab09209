"""Container engine async client implementation."""

import asyncio
import logging
from typing import Optional

import aiohttp

from ..exceptions import EngineConnectionError, ImageListError
from .session import create_session, parse_json_response, resolve_base_url
from .types import EngineConfig, ImageListOptions, ImageRecord

logger = logging.getLogger(__name__)


def build_list_params(options: ImageListOptions) -> dict[str, str]:
    """Build the query string of an image list request.

    Args:
        options: Match pattern, all flag and filters to forward

    Returns:
        Query parameters; unset options are left out
    """
    params: dict[str, str] = {}
    if options.all:
        params["all"] = "1"
    if options.match_name:
        params["filter"] = options.match_name
    filters = options.filters.to_param()
    if filters:
        params["filters"] = filters
    return params


class EngineClient:
    """Async client for a container engine's image API."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        """Initialize the engine client.

        Args:
            config: Engine connection settings (defaults to the local socket)
        """
        self.config = config or EngineConfig()
        self.base_url = resolve_base_url(self.config)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "EngineClient":
        """Enter async context manager."""
        if not self.session:
            self.session = await create_session(self.config)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def ping(self) -> bool:
        """Check whether the engine answers.

        Returns:
            True if the engine responded to /_ping
        """
        try:
            async with self.session.get(f"{self.base_url}/_ping") as resp:
                return resp.status == 200
        except (aiohttp.ClientError, asyncio.TimeoutError):
            return False

    async def list_images(
        self, options: Optional[ImageListOptions] = None
    ) -> list[ImageRecord]:
        """List images known to the engine.

        Args:
            options: Match pattern, all flag and filters, forwarded unchanged

        Returns:
            Image records in the order the engine returned them

        Raises:
            EngineConnectionError: If the engine cannot be reached
            ImageListError: If the engine rejects the request
        """
        options = options or ImageListOptions()
        params = build_list_params(options)
        url = f"{self.base_url}/images/json"
        logger.debug("Listing images from %s with %s", url, params)

        try:
            async with self.session.get(url, params=params) as resp:
                data = await parse_json_response(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise EngineConnectionError(f"Failed to list images: {e}") from e

        if not isinstance(data, list):
            raise ImageListError("Unexpected image list response from engine")

        records = [ImageRecord.from_api(entry) for entry in data]
        logger.debug("Engine returned %d images", len(records))
        return records
