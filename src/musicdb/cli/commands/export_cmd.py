# ABOUTME: The `musicdb export` command for dumping the track catalog as CSV.
# ABOUTME: Writes to a file (default name is timestamped) or to stdout with "-".

import sys
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.console import Console

from musicdb.cli.options import db_option
from musicdb.db.catalog import TrackCatalog
from musicdb.db.connection import DEFAULT_DB_PATH, open_catalog
from musicdb.db.export import write_tracks_csv


def _default_export_name() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
    return f"export_{stamp}.csv"


@click.command("export")
@click.option(
    "-o",
    "--output",
    default=None,
    help="CSV file to write, or '-' for stdout (default: export_<timestamp>.csv).",
)
@db_option
def export(output: str | None, db_path: Path | None) -> None:
    """Export the newest 5000 stored tracks as CSV."""
    console = Console(stderr=True)
    conn = open_catalog(db_path or DEFAULT_DB_PATH)
    try:
        records = TrackCatalog(conn).export_rows()
    finally:
        conn.close()

    if output == "-":
        write_tracks_csv(records, sys.stdout)
        return

    path = Path(output or _default_export_name())
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            count = write_tracks_csv(records, fh)
    except OSError as exc:
        console.print(f"[red]Could not write {path}:[/red] {exc}")
        raise SystemExit(1) from exc

    console.print(f"[green]Exported {count} track(s) to {path}[/green]")
