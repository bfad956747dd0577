"""
Reporting agent: collects the local host state and pushes it to the collector.

Run one agent per host. A failed push is logged and skipped; the next cycle
sends a fresh report anyway.
"""

import logging
import time
from typing import Optional

import httpx

from fleet_collector.config import Settings, get_settings
from fleet_collector.logging_config import setup_logging
from fleet_collector.models.host import HostReport
from fleet_collector.services.host_monitor import collect_host_report

logger = logging.getLogger(__name__)


def push_report(client: httpx.Client, collector_url: str, report: HostReport) -> None:
    """POST a report to the collector, raising httpx.HTTPStatusError on rejection."""
    response = client.post(
        f"{collector_url.rstrip('/')}/hosts",
        content=report.to_json(),
        headers={"Content-Type": "application/json"},
    )
    response.raise_for_status()


def run(settings: Settings, iterations: Optional[int] = None, client: Optional[httpx.Client] = None) -> None:
    """
    Collect and push a report every report_interval_seconds.

    Runs forever unless iterations is given. The client can be injected for
    tests; otherwise one is created for the lifetime of the loop.
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=10.0)

    try:
        done = 0
        while iterations is None or done < iterations:
            try:
                report = collect_host_report()
            except OSError as exc:
                logger.warning("Collecting host report failed: %s", exc)
            else:
                try:
                    push_report(client, settings.collector_url, report)
                except httpx.HTTPError as exc:
                    logger.warning("Push to %s failed: %s", settings.collector_url, exc)
                else:
                    logger.info("Pushed report for %s (%s)", report.hostname, report.ip)

            done += 1
            if iterations is None or done < iterations:
                time.sleep(settings.report_interval_seconds)
    finally:
        if owns_client:
            client.close()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    run(settings)


if __name__ == "__main__":
    main()
