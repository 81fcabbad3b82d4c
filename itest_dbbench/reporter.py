from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from itest_dbbench.domain.models import Stanza

QUERY_PREVIEW_CHARS = 60


def _preview(query: str, width: int = QUERY_PREVIEW_CHARS) -> str:
    if len(query) <= width:
        return query
    return query[: width - 1] + "…"


def print_stanzas(
    stanzas: Sequence[Stanza],
    title: str = "dbbench configuration",
    console: Optional[Console] = None,
) -> None:
    """
    Render the written stanzas as a rich table.

    Count stanzas have no source file and are shown with a dash.
    """
    console = console or Console()

    if not stanzas:
        console.print("[yellow]No stanzas written.[/yellow]")
        return

    counts = sum(1 for s in stanzas if s.comment is None)
    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"{counts} count queries, {len(stanzas) - counts} test queries",
    )
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Source", style="magenta")
    table.add_column("Query", style="green")
    table.add_column("Results file", style="yellow")

    for stanza in stanzas:
        table.add_row(
            stanza.section,
            stanza.comment or "-",
            _preview(stanza.query),
            str(stanza.results_file),
        )

    console.print(table)


__all__ = ["print_stanzas"]
