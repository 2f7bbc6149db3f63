"""Feed queries through the search coordinator as if typed, and print outcomes.

Usage:
    uv run python -m scripts.search_demo <text> [<text> ...]
Each argument is issued as one keystroke, GEOSEARCH_DEMO_INTERVAL_MS apart
(default 0). The provider comes from settings (GEOSEARCH_PROVIDER_BACKEND).
The first result of the last successful search is resolved to an address.
"""

import asyncio
import os
import sys

from geosearch import LocationSearchException, SearchCoordinator
from geosearch.core.config import get_settings
from geosearch.shared.telemetry import setup_logging
from geosearch.shared.telemetry.telemetry import SearchTelemetry


async def _type_queries(
    coordinator: SearchCoordinator, queries: list[str], interval: float
) -> None:
    tasks = []
    for text in queries:
        tasks.append(asyncio.create_task(coordinator.search(text)))
        await asyncio.sleep(interval)
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    for text, outcome in zip(queries, outcomes):
        if isinstance(outcome, asyncio.CancelledError):
            print(f"{text!r}: cancelled (preempted)")
        elif isinstance(outcome, LocationSearchException):
            print(f"{text!r}: {outcome.error_code} {outcome.message}")
        elif isinstance(outcome, BaseException):
            print(f"{text!r}: unexpected {outcome!r}")
        else:
            print(f"{text!r}: {len(outcome)} result(s)")
            for result in outcome:
                print(f"    {result.title} | {result.subtitle}")

    results = coordinator.current_results
    if results:
        detail = await coordinator.resolve_detail(results[0])
        print(f"Detail for {results[0]}: {detail}")


async def main() -> None:
    """Issue each argument as a search and report what happened to it."""
    if len(sys.argv) < 2:
        print("Usage: uv run python -m scripts.search_demo <text> [<text> ...]", file=sys.stderr)
        sys.exit(1)
    queries = sys.argv[1:]
    interval = int(os.environ.get("GEOSEARCH_DEMO_INTERVAL_MS", "0")) / 1000

    settings = get_settings()
    setup_logging(settings)
    telemetry = SearchTelemetry.from_settings(settings)
    telemetry.start()
    try:
        coordinator = SearchCoordinator.from_settings(settings)
        try:
            await _type_queries(coordinator, queries, interval)
        finally:
            await coordinator.provider.aclose()
    finally:
        telemetry.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
