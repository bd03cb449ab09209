"""Aligned listing output built on rich tables."""

from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

# Wide enough that no listing column is ever wrapped or truncated
CONSOLE_WIDTH = 10_000

# Spaces between adjacent columns
COLUMN_PADDING = 3


class ListingTable:
    """Buffer listing rows and write them out as one aligned table.

    Without columns (quiet listings) each row is a single value written
    straight to the output, one per line, and ``flush`` has nothing to do.
    """

    def __init__(self, output: TextIO, columns: list[str] | None = None) -> None:
        self.output = output
        self.columns = columns
        self.rows: list[list[str]] = []

    def add_row(self, fields: list[str]) -> None:
        if self.columns is None:
            self.output.write(f"{fields[0]}\n")
            return
        self.rows.append(fields)

    def build(self) -> Table:
        """Build the rich table for the buffered rows."""
        table = Table(
            box=None,
            show_edge=False,
            pad_edge=False,
            padding=(0, COLUMN_PADDING, 0, 0),
            header_style=None,
        )
        for column in self.columns or []:
            table.add_column(column, no_wrap=True, overflow="fold")
        for row in self.rows:
            table.add_row(*(Text(field) for field in row))
        return table

    def flush(self) -> None:
        """Write the header and every buffered row in one print."""
        if self.columns is None:
            return

        console = Console(
            file=self.output,
            width=CONSOLE_WIDTH,
            color_system=None,
            highlight=False,
            emoji=False,
        )
        console.print(self.build())
        self.rows = []
