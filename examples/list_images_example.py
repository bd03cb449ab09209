"""Example usage of the async image lister."""

import asyncio
import logging
import sys

from image_lister import (
    DisplayMode,
    ImageListerError,
    check_engine_connectivity,
    images,
    list_images,
    reconcile_references,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Example listing operations."""
    try:
        # Check connectivity
        logger.info("Checking engine connectivity...")
        if not await check_engine_connectivity():
            logger.error("Engine is not reachable")
            return
        logger.info("✓ Engine is accessible")

        # Raw records and their reconciled rows
        records = await list_images()
        logger.info(f"Found {len(records)} images")
        for record in records[:3]:  # Show first 3 images
            for triple in reconcile_references(record):
                logger.info(f"  {triple.repository} {triple.tag} {triple.digest}")

        # Aligned table, with digests
        await images(DisplayMode(show_digests=True), sys.stdout)

    except ImageListerError as e:
        logger.error(f"Image lister error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
