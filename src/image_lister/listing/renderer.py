"""Render listing triples as table rows."""

from datetime import datetime, timedelta, timezone
from typing import Iterable, TextIO

import humanize

from ..core.types import DisplayMode, ImageRecord, ReferenceTriple
from ..utils.digest import truncate_id
from ..utils.table import ListingTable
from .reconciler import reconcile_references

HEADER = ["REPOSITORY", "TAG", "IMAGE ID", "CREATED", "SIZE"]
DIGEST_HEADER = ["REPOSITORY", "TAG", "DIGEST", "IMAGE ID", "CREATED", "SIZE"]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def display_id(image_id: str, mode: DisplayMode) -> str:
    """Full id with --no-trunc, short id otherwise."""
    if mode.no_trunc:
        return image_id
    return truncate_id(image_id)


def format_age(created: int, now: datetime) -> str:
    """Describe how long ago an image was created (e.g. "3 days ago")."""
    elapsed = timedelta(seconds=max(now.timestamp() - created, 0))
    return f"{humanize.naturaldelta(elapsed)} ago"


def format_size(size: int) -> str:
    """Byte count with decimal units (e.g. "1.0 MB")."""
    return humanize.naturalsize(size)


def header_columns(mode: DisplayMode) -> list[str] | None:
    """Return the header columns, or None in quiet mode."""
    if mode.quiet:
        return None
    if mode.show_digests:
        return list(DIGEST_HEADER)
    return list(HEADER)


def new_listing_table(output: TextIO, mode: DisplayMode) -> ListingTable:
    """Create the empty listing buffer for a display mode."""
    return ListingTable(output, header_columns(mode))


def format_row(
    triple: ReferenceTriple, record: ImageRecord, mode: DisplayMode, now: datetime
) -> list[str]:
    """Format one listing row.

    Args:
        triple: Repository, tag and digest of the row
        record: Image the triple came from
        mode: Active display mode
        now: Render time, shared by every row

    Returns:
        The row's fields; only the id in quiet mode
    """
    image_id = display_id(record.id, mode)
    if mode.quiet:
        return [image_id]

    fields = [triple.repository, triple.tag]
    if mode.show_digests:
        fields.append(triple.digest)
    fields.extend([image_id, format_age(record.created, now), format_size(record.size)])
    return fields


def render_images(
    records: Iterable[ImageRecord],
    mode: DisplayMode,
    table: ListingTable,
    now: datetime | None = None,
) -> ListingTable:
    """Add every row of a listing to a listing table.

    The table is not flushed; callers flush it once when not quiet.

    Args:
        records: Images in listing order
        mode: Active display mode
        table: Buffer receiving the rows (see ``new_listing_table``)
        now: Render time; captured once in UTC when omitted

    Returns:
        ListingTable: The same table, holding the listing

    Raises:
        ReferenceParseError: If any record holds a malformed reference
    """
    if now is None:
        now = utc_now()

    for record in records:
        for triple in reconcile_references(record):
            table.add_row(format_row(triple, record, mode, now))

    return table
