"""Filter criteria forwarded to the engine's image list endpoint."""

import json
from dataclasses import dataclass

from ..exceptions import FilterFormatError

BAD_FORMAT_MESSAGE = "bad format of filter (expected name=value)"


@dataclass(frozen=True)
class FilterArgs:
    """Immutable set of (filter name, value) pairs.

    The lister never evaluates these; they are packaged and sent as-is.
    """

    pairs: frozenset[tuple[str, str]] = frozenset()

    def add(self, name: str, value: str) -> "FilterArgs":
        """Return new filter args that also accept ``value`` for ``name``."""
        return FilterArgs(self.pairs | {(name, value)})

    def get(self, name: str) -> list[str]:
        """Return the values of a filter, sorted."""
        return sorted(value for key, value in self.pairs if key == name)

    def to_param(self) -> str:
        """Serialize to the engine query form.

        Returns:
            JSON like ``{"dangling": {"true": true}}`` or an empty string
            when no filter is set
        """
        if not self.pairs:
            return ""

        fields: dict[str, dict[str, bool]] = {}
        for name, value in sorted(self.pairs):
            fields.setdefault(name, {})[value] = True
        return json.dumps(fields, separators=(",", ":"))


def parse_filter_flag(arg: str, prev: FilterArgs | None = None) -> FilterArgs:
    """Parse a ``name=value`` filter flag into filter args.

    Args:
        arg: Raw flag value (e.g. "dangling=true", "label=com.example=1")
        prev: Filter args to extend; empty when omitted

    Returns:
        Filter args holding ``prev`` plus the parsed pair

    Raises:
        FilterFormatError: If the flag has no '='
    """
    filters = prev if prev is not None else FilterArgs()
    if not arg:
        return filters

    if "=" not in arg:
        raise FilterFormatError(BAD_FORMAT_MESSAGE)

    name, value = arg.split("=", 1)
    return filters.add(name.strip().lower(), value.strip())


def parse_filter_flags(args: list[str]) -> FilterArgs:
    """Parse every filter flag given on the command line."""
    filters = FilterArgs()
    for arg in args:
        filters = parse_filter_flag(arg, filters)
    return filters
