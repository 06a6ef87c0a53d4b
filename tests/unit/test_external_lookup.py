# ABOUTME: Unit tests for the CLI's external lookup glue.
# ABOUTME: Validates that the per-source rate limits carry over between separate lookup calls.

import httpx
import pytest

from musicdb.cli import external
from musicdb.lookup import (
    LookupSettings,
    MusicdbHttpClient,
    Query,
    RateLimitedScheduler,
    SourceId,
    SourcePolicy,
)
from tests.fixtures.catalog_pages import NO_RESULTS_HTML
from tests.fixtures.fakes import FakeClock

_ONE_PER_MINUTE = LookupSettings(
    policies={
        source: SourcePolicy(reservoir=1, refresh_interval=60, min_interval=0)
        for source in SourceId
    }
)


@pytest.fixture
def recorded_requests(monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
    """Route every lookup through a MockTransport and record its requests."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=NO_RESULTS_HTML)

    monkeypatch.setattr(
        external,
        "_create_http_client",
        lambda settings: MusicdbHttpClient(transport=httpx.MockTransport(handler)),
    )
    return seen


class TestProcessSchedulers:
    """Tests for the process-wide scheduler cache."""

    def test_built_once_per_process(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(external, "_schedulers", None)
        first = external.process_schedulers(_ONE_PER_MINUTE)
        second = external.process_schedulers(LookupSettings())
        assert first is second
        assert first[SourceId.JWID].policy.reservoir == 1


class TestRunExternalLookup:
    """Tests for run_external_lookup across calls."""

    def test_second_call_waits_for_refill(
        self,
        monkeypatch: pytest.MonkeyPatch,
        fake_clock: FakeClock,
        recorded_requests: list[httpx.Request],
    ) -> None:
        schedulers = {
            source: RateLimitedScheduler(
                source.value,
                _ONE_PER_MINUTE.policy_for(source),
                clock=fake_clock,
                sleep=fake_clock.sleep,
            )
            for source in SourceId
        }
        monkeypatch.setattr(external, "_schedulers", schedulers)

        external.run_external_lookup(Query(title="One"), _ONE_PER_MINUTE)
        assert fake_clock.now == 0

        external.run_external_lookup(Query(title="Two"), _ONE_PER_MINUTE)

        assert len(recorded_requests) == 4
        assert fake_clock.now == 60
        assert 60 in fake_clock.sleeps

    def test_calls_share_one_reservoir(
        self, monkeypatch: pytest.MonkeyPatch, recorded_requests: list[httpx.Request]
    ) -> None:
        monkeypatch.setattr(external, "_schedulers", None)
        settings = LookupSettings(
            policies={source: SourcePolicy(min_interval=0) for source in SourceId}
        )

        external.run_external_lookup(Query(title="One"), settings)
        external.run_external_lookup(Query(title="Two"), settings)

        schedulers = external.process_schedulers(settings)
        assert [schedulers[s].remaining for s in SourceId] == [28, 28]
