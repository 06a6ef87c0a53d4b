# ABOUTME: CLI package for musicdb, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from musicdb.cli.commands import artist_cmd, export_cmd, lookup_cmd, track_cmd


@click.group()
@click.version_option(package_name="musicdb")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """musicdb - resolve work codes, tempo, and key for songs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


cli.add_command(lookup_cmd.lookup)
cli.add_command(track_cmd.track)
cli.add_command(artist_cmd.artist)
cli.add_command(export_cmd.export)
