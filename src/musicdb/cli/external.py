# ABOUTME: Glue between the CLI commands and the external lookup pipeline.
# ABOUTME: Keeps one set of source schedulers per process, runs queries, and renders results with Rich.

import asyncio

from rich.console import Console
from rich.table import Table

from musicdb.lookup import (
    LookupOrchestrator,
    LookupResult,
    LookupSettings,
    MusicdbHttpClient,
    Query,
    RateLimitedScheduler,
    SourceId,
    build_orchestrator,
    build_schedulers,
)

# Rate-limit state shared by every lookup this process makes.
_schedulers: dict[SourceId, RateLimitedScheduler] | None = None


def _create_http_client(settings: LookupSettings) -> MusicdbHttpClient:
    """Create the HTTP fetcher shared by every source adapter."""
    return MusicdbHttpClient(timeout=settings.timeout)


def process_schedulers(settings: LookupSettings) -> dict[SourceId, RateLimitedScheduler]:
    """Return the process-wide schedulers, creating them on first use."""
    global _schedulers
    if _schedulers is None:
        _schedulers = build_schedulers(settings)
    return _schedulers


async def _lookup(query: Query, settings: LookupSettings) -> LookupResult | None:
    async with _create_http_client(settings) as http_client:
        orchestrator: LookupOrchestrator = build_orchestrator(
            http_client, settings, schedulers=process_schedulers(settings)
        )
        return await orchestrator.lookup(query)


def run_external_lookup(query: Query, settings: LookupSettings) -> LookupResult | None:
    """Run one external lookup to completion from synchronous CLI code.

    Each call gets its own event loop and HTTP client; the schedulers, and
    so the per-source budget, carry over between calls.
    """
    return asyncio.run(_lookup(query, settings))


def render_result(console: Console, title: str, artist: str | None, result: LookupResult) -> None:
    """Print a lookup result as a two-column Rich table."""
    heading = f"{title} / {artist}" if artist else title
    table = Table(title=heading, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Work code", result.work_code or "[dim]-[/dim]")
    table.add_row("BPM", result.bpm or "[dim]-[/dim]")
    table.add_row("Key", result.key or "[dim]-[/dim]")
    table.add_row("Confidence", str(result.confidence))
    table.add_row("Source", result.provenance.source.value)
    table.add_row("URL", result.provenance.url)
    table.add_row("Fetched", result.provenance.fetched_at.isoformat())

    console.print(table)
