"""System information collection for pysysinfo."""

import logging
import platform
import socket
import time
from pathlib import Path

import psutil

from pysysinfo.errors import CollectionError
from pysysinfo.models import (
    CpuInfo,
    DiskUsage,
    HostInfo,
    MemoryInfo,
    NetIOCounters,
    SystemSnapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_DISK_PATH = "/"
CPUINFO_PATH = Path("/proc/cpuinfo")

# Errors that mean the OS refused or failed to answer a query
OS_QUERY_ERRORS = (psutil.Error, OSError)


def read_cpu_model_names(cpuinfo_path: Path = CPUINFO_PATH) -> dict[int, str]:
    """
    Map logical core index to model name using /proc/cpuinfo.

    Returns an empty dict where the file is missing or unreadable
    (non-Linux hosts) or carries no model names (some ARM kernels).
    """
    try:
        text = cpuinfo_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return {}

    names: dict[int, str] = {}
    current: int | None = None
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key == "processor" and value.isdigit():
            current = int(value)
        elif key == "model name" and current is not None:
            names[current] = value
    return names


def read_platform_info() -> tuple[str, str, str]:
    """Return (platform, platform family, platform version) for this OS."""
    system = platform.system()

    if system == "Linux":
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            # No os-release file, e.g. minimal containers
            return "", "", ""
        name = release.get("ID", "")
        like = release.get("ID_LIKE", "").split()
        return name, like[0] if like else name, release.get("VERSION_ID", "")

    if system == "Darwin":
        return "darwin", "Standalone Workstation", platform.mac_ver()[0]

    if system == "Windows":
        release, version, _, _ = platform.win32_ver()
        return f"Microsoft Windows {release}".strip(), "Standalone Workstation", version

    return system.lower(), "", platform.version()


class SystemInfoCollector:
    """
    Collects CPU, memory, disk, host and network information using psutil.

    Every collect_* method answers one OS query and raises CollectionError,
    tagged with its category, when the query fails. Nothing here exits the
    process; the caller decides what a failure means.
    """

    def __init__(
        self,
        disk_path: str = DEFAULT_DISK_PATH,
        cpuinfo_path: Path = CPUINFO_PATH,
    ) -> None:
        """
        Initialize the SystemInfoCollector.

        Args:
            disk_path: Mount path whose usage is reported. Default "/".
            cpuinfo_path: Where CPU model names are read from on Linux.
        """
        self._disk_path = disk_path
        self._cpuinfo_path = cpuinfo_path

    @property
    def disk_path(self) -> str:
        """Get the mount path used for disk usage."""
        return self._disk_path

    def collect(self) -> SystemSnapshot:
        """Run every query in order and build the snapshot."""
        cpu_info = self.collect_cpu()
        mem_info = self.collect_memory()
        disk_info = self.collect_disk()
        host_info = self.collect_host()
        net_info = self.collect_network()

        return SystemSnapshot(
            cpu_info=cpu_info,
            mem_info=mem_info,
            disk_info=disk_info,
            host_info=host_info,
            net_info=net_info,
        )

    def collect_cpu(self) -> list[CpuInfo]:
        """Collect one record per logical core."""
        logger.debug("Fetching CPU info")
        try:
            logical = psutil.cpu_count(logical=True)
            physical = psutil.cpu_count(logical=False) or 0
            model_names = read_cpu_model_names(self._cpuinfo_path)
            frequencies = self._cpu_frequencies()
        except OS_QUERY_ERRORS as exc:
            raise CollectionError("cpu", exc) from exc

        if not logical:
            raise CollectionError("cpu", "logical core count is unavailable")

        fallback_name = platform.processor()
        cpus: list[CpuInfo] = []
        for index in range(logical):
            if index < len(frequencies):
                mhz = frequencies[index]
            else:
                mhz = frequencies[0] if frequencies else 0.0
            cpus.append(
                CpuInfo(
                    cpu=index,
                    model_name=model_names.get(index, fallback_name),
                    cores=physical,
                    mhz=float(mhz),
                )
            )
        return cpus

    def _cpu_frequencies(self) -> list[float]:
        """Current clock speed per core in MHz, or one overall value."""
        if not hasattr(psutil, "cpu_freq"):
            # Not implemented by psutil on every platform
            return []

        try:
            per_cpu = psutil.cpu_freq(percpu=True) or []
            if per_cpu:
                return [freq.current for freq in per_cpu]
            overall = psutil.cpu_freq()
        except NotImplementedError:
            # cpufreq present in sysfs without a current frequency file
            return []

        return [overall.current] if overall else []

    def collect_memory(self) -> MemoryInfo:
        """Collect virtual memory usage."""
        logger.debug("Fetching memory info")
        try:
            mem = psutil.virtual_memory()
        except OS_QUERY_ERRORS as exc:
            raise CollectionError("memory", exc) from exc

        return MemoryInfo(
            total=mem.total,
            available=mem.available,
            used=mem.used,
            used_percent=float(mem.percent),
        )

    def collect_disk(self) -> DiskUsage:
        """Collect usage of the configured mount path."""
        logger.debug("Fetching disk info for %s", self._disk_path)
        try:
            usage = psutil.disk_usage(self._disk_path)
        except OS_QUERY_ERRORS as exc:
            raise CollectionError("disk", exc) from exc

        return DiskUsage(
            path=self._disk_path,
            total=usage.total,
            free=usage.free,
            used=usage.used,
            used_percent=float(usage.percent),
        )

    def collect_host(self) -> HostInfo:
        """Collect host identity, kernel and uptime details."""
        logger.debug("Fetching host info")
        try:
            boot_time = int(psutil.boot_time())
            procs = len(psutil.pids())
            platform_name, family, version = read_platform_info()
            hostname = socket.gethostname()
        except OS_QUERY_ERRORS as exc:
            raise CollectionError("host", exc) from exc

        return HostInfo(
            hostname=hostname,
            os=platform.system().lower(),
            platform=platform_name,
            platform_family=family,
            platform_version=version,
            kernel_version=platform.release(),
            kernel_arch=platform.machine(),
            uptime=max(0, int(time.time()) - boot_time),
            boot_time=boot_time,
            procs=procs,
        )

    def collect_network(self) -> list[NetIOCounters]:
        """Collect I/O counters for each network interface."""
        logger.debug("Fetching network info")
        try:
            counters = psutil.net_io_counters(pernic=True)
        except OS_QUERY_ERRORS as exc:
            raise CollectionError("network", exc) from exc

        return [
            NetIOCounters(
                name=name,
                bytes_sent=stats.bytes_sent,
                bytes_recv=stats.bytes_recv,
                packets_sent=stats.packets_sent,
                packets_recv=stats.packets_recv,
            )
            for name, stats in counters.items()
        ]
