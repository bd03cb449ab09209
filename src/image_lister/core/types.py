"""Data types shared across the image lister."""

import os
from dataclasses import dataclass, field
from typing import Any

from .filters import FilterArgs

NONE = "<none>"
NONE_TAG = "<none>:<none>"
NONE_DIGEST = "<none>@<none>"

DEFAULT_ENGINE_URL = "unix:///var/run/docker.sock"


@dataclass(frozen=True)
class EngineConfig:
    """Container engine connection configuration."""

    url: str = DEFAULT_ENGINE_URL
    timeout: int = 30
    api_version: str | None = None

    @classmethod
    def from_env(cls, timeout: int = 30) -> "EngineConfig":
        """Build a config from DOCKER_HOST and DOCKER_API_VERSION."""
        return cls(
            url=os.getenv("DOCKER_HOST") or DEFAULT_ENGINE_URL,
            timeout=timeout,
            api_version=os.getenv("DOCKER_API_VERSION") or None,
        )


@dataclass(frozen=True)
class DisplayMode:
    """Display switches for one listing."""

    quiet: bool = False
    show_all: bool = False
    no_trunc: bool = False
    show_digests: bool = False
    filters: FilterArgs = field(default_factory=FilterArgs)


@dataclass(frozen=True)
class ImageListOptions:
    """Options forwarded to the engine's image list endpoint."""

    match_name: str = ""
    all: bool = False
    filters: FilterArgs = field(default_factory=FilterArgs)

    @classmethod
    def from_mode(cls, mode: DisplayMode, match_name: str = "") -> "ImageListOptions":
        return cls(match_name=match_name, all=mode.show_all, filters=mode.filters)


@dataclass(frozen=True)
class ImageRecord:
    """One image as reported by the engine."""

    id: str
    repo_tags: list[str] = field(default_factory=list)
    repo_digests: list[str] = field(default_factory=list)
    created: int = 0
    size: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ImageRecord":
        """Build a record from an engine ``/images/json`` entry."""
        return cls(
            id=data.get("Id", ""),
            repo_tags=list(data.get("RepoTags") or []),
            repo_digests=list(data.get("RepoDigests") or []),
            created=int(data.get("Created") or 0),
            size=int(data.get("Size") or 0),
        )


@dataclass(frozen=True)
class ReferenceTriple:
    """Repository, tag and digest of one listing row."""

    repository: str = NONE
    tag: str = NONE
    digest: str = NONE
