"""Reference reconciliation and row rendering."""

from .reconciler import combined_references, reconcile_references
from .renderer import header_columns, new_listing_table, render_images

__all__ = [
    "combined_references",
    "reconcile_references",
    "header_columns",
    "new_listing_table",
    "render_images",
]
