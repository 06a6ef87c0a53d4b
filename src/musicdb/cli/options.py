# ABOUTME: Shared Click options for musicdb CLI commands.
# ABOUTME: Provides reusable decorators for --db, --artist, and --timeout.

from pathlib import Path

import click

from musicdb.db.connection import DEFAULT_DB_PATH
from musicdb.lookup.http import DEFAULT_TIMEOUT

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to track database (default: {DEFAULT_DB_PATH})",
)

artist_option = click.option(
    "-a",
    "--artist",
    default=None,
    help="Artist name to narrow the match.",
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0.1),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds for catalog sources.",
)
