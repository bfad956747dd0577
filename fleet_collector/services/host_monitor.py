import platform
import socket
import time
from typing import List, Optional

import psutil

from fleet_collector.models.host import DiskInfo, HostReport

_GIB = 1024 ** 3


def _primary_ipv4() -> str:
    """
    Return the first non-loopback IPv4 address of this machine.

    Falls back to resolving the hostname when no interface carries one.
    """
    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family == socket.AF_INET and not address.address.startswith("127."):
                return address.address
    return socket.gethostbyname(socket.gethostname())


def _cpu_frequency() -> float:
    freq = psutil.cpu_freq()
    return float(freq.current) if freq is not None else 0.0


def _cpu_temperature() -> float:
    # sensors_temperatures existiert nur unter Linux/FreeBSD
    read_sensors = getattr(psutil, "sensors_temperatures", None)
    if read_sensors is None:
        return 0.0

    readings = [entry.current for entries in read_sensors().values() for entry in entries]
    return float(max(readings)) if readings else 0.0


def _disks() -> List[DiskInfo]:
    disks: List[DiskInfo] = []
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except (PermissionError, OSError):
            # e.g. empty card readers or mounts we are not allowed to stat
            continue
        disks.append(
            DiskInfo(
                path=partition.mountpoint,
                usage=float(usage.percent),
                size=usage.total / _GIB,
            )
        )
    return disks


def _process_names() -> List[str]:
    names: List[str] = []
    for proc in psutil.process_iter(["name"]):
        name: Optional[str] = proc.info.get("name")
        if name:
            names.append(name)
    return names


def collect_host_report() -> HostReport:
    """
    Collect the current state of this machine and return it as a HostReport.

    This function encapsulates all direct calls to psutil/platform/socket so
    that the agent only needs to push the returned report. GPU fields are
    left empty; psutil has no portable way to read them.
    """
    memory = psutil.virtual_memory()

    return HostReport(
        hostname=socket.gethostname(),
        ip=_primary_ipv4(),
        uptime=max(time.time() - psutil.boot_time(), 0.0),
        cpu_usage=float(psutil.cpu_percent(interval=0.1)),
        cpu_frequency=_cpu_frequency(),
        cpu_temperature=_cpu_temperature(),
        memory_usage=(memory.total - memory.available) / _GIB,
        memory_max=memory.total / _GIB,
        disks=_disks(),
        processes=_process_names(),
        os_name=platform.system(),
        os_version=platform.version(),
        os_kernel=platform.release(),
        os_architecture=platform.machine(),
        cpu_model=platform.processor() or "unknown",
    )
