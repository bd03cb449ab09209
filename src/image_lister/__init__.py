"""Image Lister - render a container engine's image list as an aligned table."""

__version__ = "0.1.0"

from .core.engine_client import EngineClient
from .core.filters import FilterArgs, parse_filter_flag
from .core.types import (
    DisplayMode,
    EngineConfig,
    ImageListOptions,
    ImageRecord,
    ReferenceTriple,
)
from .exceptions import (
    EngineConnectionError,
    FilterFormatError,
    ImageListError,
    ImageListerError,
    ReferenceParseError,
    ValidationError,
)
from .commands import (
    check_engine_connectivity,
    images,
    list_images,
    render_to_string,
)
from .listing.reconciler import reconcile_references
from .listing.renderer import render_images

__all__ = [
    "EngineClient",
    "FilterArgs",
    "parse_filter_flag",
    "DisplayMode",
    "EngineConfig",
    "ImageListOptions",
    "ImageRecord",
    "ReferenceTriple",
    "check_engine_connectivity",
    "images",
    "list_images",
    "render_to_string",
    "reconcile_references",
    "render_images",
    "ImageListerError",
    "EngineConnectionError",
    "ImageListError",
    "ValidationError",
    "ReferenceParseError",
    "FilterFormatError",
]
