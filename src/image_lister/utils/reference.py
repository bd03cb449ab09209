"""Repository reference parsing.

A reference names an image either by repository and tag
(``library/nginx:alpine``) or by repository and digest
(``library/nginx@sha256:...``). Parsing yields exactly one of three
variants, so a reference can never carry both a tag and a digest.
"""

import re
from dataclasses import dataclass
from typing import Union

from ..exceptions import ReferenceParseError
from .digest import check_digest

NAME_TOTAL_LENGTH_MAX = 255

_ALPHA_NUMERIC = r"[a-z0-9]+"
_SEPARATOR = r"(?:[._]|__|[-]+)"
_NAME_COMPONENT = rf"{_ALPHA_NUMERIC}(?:{_SEPARATOR}{_ALPHA_NUMERIC})*"
_HOSTNAME_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
_HOSTNAME = rf"{_HOSTNAME_COMPONENT}(?:\.{_HOSTNAME_COMPONENT})*(?::[0-9]+)?"
_NAME = rf"(?:{_HOSTNAME}/)?{_NAME_COMPONENT}(?:/{_NAME_COMPONENT})*"
_TAG = r"[\w][\w.-]{0,127}"
_DIGEST = r"[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}"

REFERENCE_PATTERN = re.compile(
    rf"^({_NAME})(?::({_TAG}))?(?:@({_DIGEST}))?$", re.ASCII
)


@dataclass(frozen=True)
class Named:
    """Repository name with neither tag nor digest."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Tagged:
    """Repository name with a tag."""

    name: str
    tag: str

    def __str__(self) -> str:
        return f"{self.name}:{self.tag}"


@dataclass(frozen=True)
class Digested:
    """Repository name with a content digest."""

    name: str
    digest: str

    def __str__(self) -> str:
        return f"{self.name}@{self.digest}"


Reference = Union[Named, Tagged, Digested]


def parse_named(value: str) -> Reference:
    """Parse a reference string into a named reference.

    Args:
        value: Reference string
            - tagged: "nginx:alpine", "localhost:5000/myapp:latest"
            - digested: "nginx@sha256:<64 hex>"

    Returns:
        Reference: ``Tagged``, ``Digested`` or plain ``Named``. A string
        with both a tag and a digest resolves to ``Digested``.

    Raises:
        ReferenceParseError: If the string is not a valid reference

    Examples:
        ref = parse_named("library/foo:latest")
        # Tagged(name="library/foo", tag="latest")
    """
    match = REFERENCE_PATTERN.fullmatch(value)
    if match is None:
        if not value:
            raise ReferenceParseError("repository name must have at least one component")
        if REFERENCE_PATTERN.fullmatch(value.lower()):
            raise ReferenceParseError(
                f"repository name must be lowercase: {value!r}"
            )
        raise ReferenceParseError(f"invalid reference format: {value!r}")

    name, tag, digest = match.groups()

    if len(name) > NAME_TOTAL_LENGTH_MAX:
        raise ReferenceParseError(
            f"repository name must not be more than {NAME_TOTAL_LENGTH_MAX} characters"
        )

    if digest is not None:
        problem = check_digest(digest)
        if problem is not None:
            raise ReferenceParseError(f"{problem}: {value!r}")
        return Digested(name=name, digest=digest)

    if tag is not None:
        return Tagged(name=name, tag=tag)

    return Named(name=name)
