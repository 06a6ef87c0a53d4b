# ABOUTME: The `musicdb track` command: local catalog first, external lookup on a miss.
# ABOUTME: Seeds a row for unknown songs, stores any external result on it, and prints the track.

import logging
from pathlib import Path

import click
from rich.console import Console

from musicdb.cli.external import render_result, run_external_lookup
from musicdb.cli.options import artist_option, db_option, timeout_option
from musicdb.db.catalog import TrackCatalog
from musicdb.db.connection import DEFAULT_DB_PATH, open_catalog
from musicdb.db.mapping import TrackRecord
from musicdb.lookup import LookupSettings, Query

logger = logging.getLogger(__name__)


def _print_record(console: Console, record: TrackRecord) -> None:
    heading = record.title + (f" - {record.artist}" if record.artist else "")
    console.print(f"[bold]{heading}[/bold]")
    console.print(f"  Work code: {record.work_code or '-'}")
    console.print(f"  BPM/Key: {record.bpm or '-'} / {record.key or '-'}")
    console.print(f"  Confidence: {record.confidence}")


@click.command("track")
@click.argument("title")
@artist_option
@db_option
@timeout_option
def track(title: str, artist: str | None, db_path: Path | None, timeout: float) -> None:
    """Show a stored track, resolving it externally if it is new or still a seed."""
    console = Console()
    title = title.strip()
    artist = (artist or "").strip()
    if not title:
        console.print("[red]Title must not be empty.[/red]")
        raise SystemExit(1)

    conn = open_catalog(db_path or DEFAULT_DB_PATH)
    try:
        catalog = TrackCatalog(conn)

        found = catalog.find(title, artist)
        if found is not None and not found.is_seed:
            _print_record(console, found)
            return

        if found is None:
            track_id = catalog.add_seed(title, artist)
        else:
            track_id = found.id
            logger.info("Track %d is still a seed, retrying external lookup", track_id)

        query = Query(title=title, artist=artist or None)
        result = run_external_lookup(query, LookupSettings(timeout=timeout))

        if result is None:
            if found is None:
                console.print("[yellow]Not in the catalog and no external match.[/yellow]")
                console.print(f"[dim]Seeded track #{track_id} for {title}.[/dim]")
            else:
                console.print(f"[yellow]Track #{track_id} is still unresolved.[/yellow]")
            return

        catalog.apply_result(track_id, result)
        logger.info("Stored %s result on track %d", result.provenance.source.value, track_id)
        console.print(f"[green]Resolved and stored as track #{track_id}.[/green]")
        render_result(console, title, artist or None, result)
    finally:
        conn.close()
