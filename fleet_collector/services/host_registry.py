import threading
from typing import Dict, List

from fleet_collector.models.host import HostReport


class HostRegistry:
    """
    In-memory store holding the latest HostReport per host ip.

    All access to the underlying dict goes through a single lock. The lock
    only covers the dict operation itself; decoding and serialising reports
    happens outside of it. Concurrent upserts for the same ip are
    last-write-wins, there is no version or timestamp check.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hosts: Dict[str, HostReport] = {}

    def upsert(self, report: HostReport) -> None:
        """Insert the report, replacing any earlier report for the same ip."""
        with self._lock:
            self._hosts[report.ip] = report

    def snapshot(self) -> List[HostReport]:
        """
        Return the reports of all known hosts at the moment of the call.

        Reports are immutable, so the returned list can be handed out without
        copying the individual entries. The order of the list is not defined.
        """
        with self._lock:
            return list(self._hosts.values())
