# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module renders package queries on a rich console."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from packquery.packmanager.query import Query
from packquery.util import list_join_str


class TableBuilder:
    """Builder to provide common table-building utilities for console output."""

    @staticmethod
    def _make_table(content: dict[str, str], columns: list[str]) -> Table:
        table = Table(show_header=False, box=None)
        for col in columns:
            table.add_column(col, justify="left")
        for field, value in content.items():
            table.add_row(field, value)
        return table

    @staticmethod
    def make_query_table(query: Query) -> Table:
        """Return a table with one row per reportable parameter of ``query``.

        Parameters
        ----------
        query : Query
            The query to describe.

        Returns
        -------
        Table
            The table, with the parameter names in the first column and their values in the second.
        """
        content: dict[str, str] = {}
        for key, value in query.fields().items():
            if key == "types":
                content[f"{key}:"] = escape(list_join_str(value, ", ")) or "[dim]any[/]"
            elif isinstance(value, bool):
                content[f"{key}:"] = "[green]yes[/]" if value else "[red]no[/]"
            else:
                content[f"{key}:"] = escape(value) or "[dim]any[/]"
        return TableBuilder._make_table(content, ["Field", "Value"])


def print_query(query: Query, console: Console | None = None) -> None:
    """Print the canonical form of ``query`` followed by its parameters.

    Parameters
    ----------
    query : Query
        The query to print.
    console : Console | None
        The console to print to. A console writing to stdout is used if None.
    """
    console = console or Console()
    console.print(f"[bold]{escape(str(query))}[/]", highlight=False)
    console.print(TableBuilder.make_query_table(query))
