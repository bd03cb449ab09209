"""Async functional image list operations."""

from ..core.engine_client import EngineClient
from ..core.types import EngineConfig, ImageListOptions, ImageRecord


async def fetch_images(
    config: EngineConfig, options: ImageListOptions | None = None
) -> list[ImageRecord]:
    """Fetch the image list with a short-lived client.

    Args:
        config: Engine configuration
        options: Options forwarded to the engine

    Returns:
        Image records in engine order
    """
    async with EngineClient(config) as client:
        return await client.list_images(options)


async def check_connectivity(config: EngineConfig) -> bool:
    """Return True when the engine answers its ping endpoint."""
    async with EngineClient(config) as client:
        return await client.ping()
