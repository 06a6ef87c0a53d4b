# ABOUTME: The `musicdb lookup` command for a one-off external catalog lookup.
# ABOUTME: Queries every source, prints the best match as a table or JSON; touches no database.

import json

import click
from rich.console import Console

from musicdb.cli.external import render_result, run_external_lookup
from musicdb.cli.options import artist_option, timeout_option
from musicdb.lookup import LookupSettings, Query


@click.command("lookup")
@click.argument("title")
@artist_option
@timeout_option
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
def lookup(title: str, artist: str | None, timeout: float, as_json: bool) -> None:
    """Look up a song in the external catalogs without storing it."""
    console = Console()
    if not title.strip():
        console.print("[red]Title must not be empty.[/red]")
        raise SystemExit(1)

    query = Query(title=title.strip(), artist=artist.strip() if artist else None)
    result = run_external_lookup(query, LookupSettings(timeout=timeout))

    if as_json:
        click.echo(json.dumps(result.to_dict() if result else None, ensure_ascii=False))
        return

    if result is None:
        console.print("[yellow]No external match.[/yellow]")
        return

    render_result(console, query.title, query.artist, result)
