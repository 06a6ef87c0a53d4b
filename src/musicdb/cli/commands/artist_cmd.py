# ABOUTME: The `musicdb artist` command for listing stored tracks by artist.
# ABOUTME: Displays a Rich table of the newest tracks, capped at 50.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from musicdb.cli.options import db_option
from musicdb.db.catalog import MAX_ARTIST_LIST, TrackCatalog
from musicdb.db.connection import DEFAULT_DB_PATH, open_catalog


@click.command("artist")
@click.argument("name")
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(1, MAX_ARTIST_LIST, clamp=True),
    default=25,
    show_default=True,
    help=f"Maximum tracks to show (capped at {MAX_ARTIST_LIST}).",
)
@db_option
def artist(name: str, limit: int, db_path: Path | None) -> None:
    """List stored tracks for an artist, newest first."""
    console = Console()
    conn = open_catalog(db_path or DEFAULT_DB_PATH)
    try:
        records = TrackCatalog(conn).list_by_artist(name, limit)
    finally:
        conn.close()

    if not records:
        console.print(f"[yellow]No tracks for {name.strip()}.[/yellow]")
        return

    table = Table(title=name.strip())
    table.add_column("Title", style="bold")
    table.add_column("Work code")
    table.add_column("BPM", width=6)
    table.add_column("Key", width=8)

    for record in records:
        table.add_row(
            record.title,
            record.work_code or "[dim]-[/dim]",
            record.bpm or "",
            record.key or "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} track(s)[/dim]")
