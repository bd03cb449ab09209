"""Utility functions for the image lister."""

from .digest import check_digest, truncate_id
from .reference import Digested, Named, Tagged, parse_named
from .table import ListingTable

__all__ = [
    "check_digest",
    "truncate_id",
    "parse_named",
    "Named",
    "Tagged",
    "Digested",
    "ListingTable",
]
