"""Command line entry point for listing images."""

import argparse
import asyncio
import logging
import sys

from .commands import images
from .core.filters import parse_filter_flags
from .core.types import DEFAULT_ENGINE_URL, DisplayMode, EngineConfig
from .exceptions import ImageListerError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="image-lister",
        description="List images known to a container engine.",
    )
    p.add_argument(
        "--host", "-H",
        dest="host",
        default=None,
        help=f"Engine host (default: $DOCKER_HOST or {DEFAULT_ENGINE_URL})",
    )
    p.add_argument(
        "--api-version",
        dest="api_version",
        default=None,
        help="Engine API version to request (default: $DOCKER_API_VERSION)",
    )
    p.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    sub = p.add_subparsers(dest="command", required=True)
    images_p = sub.add_parser("images", help="List images")
    images_p.add_argument(
        "repository",
        nargs="?",
        default="",
        metavar="REPOSITORY[:TAG]",
        help="Only show images whose name matches",
    )
    images_p.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show numeric IDs",
    )
    images_p.add_argument(
        "--all", "-a",
        dest="show_all",
        action="store_true",
        help="Show all images (default hides intermediate images)",
    )
    images_p.add_argument(
        "--no-trunc",
        dest="no_trunc",
        action="store_true",
        help="Don't truncate output",
    )
    images_p.add_argument(
        "--digests",
        dest="show_digests",
        action="store_true",
        help="Show digests",
    )
    images_p.add_argument(
        "--filter", "-f",
        dest="filters",
        action="append",
        default=[],
        help="Filter output based on conditions provided (name=value)",
    )
    return p


def engine_config(args: argparse.Namespace) -> EngineConfig:
    """Command line flags override the environment."""
    config = EngineConfig.from_env(timeout=args.timeout)
    return EngineConfig(
        url=args.host or config.url,
        timeout=config.timeout,
        api_version=args.api_version or config.api_version,
    )


def run_images(args: argparse.Namespace) -> None:
    # Filters are checked here; the engine evaluates them.
    mode = DisplayMode(
        quiet=args.quiet,
        show_all=args.show_all,
        no_trunc=args.no_trunc,
        show_digests=args.show_digests,
        filters=parse_filter_flags(args.filters),
    )
    asyncio.run(
        images(mode, sys.stdout, match_name=args.repository, config=engine_config(args))
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        run_images(args)
    except ImageListerError as e:
        logger.debug("images command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
