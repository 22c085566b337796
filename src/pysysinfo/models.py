"""Data models for pysysinfo."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class CpuInfo:
    """Static information about one logical CPU."""

    cpu: int  # Logical core index
    model_name: str
    cores: int  # Physical cores on the machine
    mhz: float


@dataclass(slots=True, frozen=True)
class MemoryInfo:
    """Point-in-time virtual memory usage."""

    total: int  # Bytes
    available: int
    used: int
    used_percent: float


@dataclass(slots=True, frozen=True)
class DiskUsage:
    """Usage of the filesystem mounted at ``path``."""

    path: str
    total: int  # Bytes
    free: int
    used: int
    used_percent: float


@dataclass(slots=True, frozen=True)
class HostInfo:
    """Host identity, kernel and uptime information."""

    hostname: str
    os: str
    platform: str
    platform_family: str
    platform_version: str
    kernel_version: str
    kernel_arch: str
    uptime: int  # Seconds
    boot_time: int  # Epoch seconds
    procs: int


@dataclass(slots=True, frozen=True)
class NetIOCounters:
    """I/O counters of a single network interface."""

    name: str
    bytes_sent: int
    bytes_recv: int
    packets_sent: int
    packets_recv: int


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Immutable snapshot of everything collected in one run."""

    cpu_info: list[CpuInfo] = field(default_factory=list)
    mem_info: MemoryInfo | None = None
    disk_info: DiskUsage | None = None
    host_info: HostInfo | None = None
    net_info: list[NetIOCounters] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Check that every single-record field has been populated."""
        return (
            self.mem_info is not None
            and self.disk_info is not None
            and self.host_info is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the snapshot to plain JSON-ready data."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SystemSnapshot":
        """Rebuild a snapshot from the output of ``to_dict``."""
        mem = data.get("mem_info")
        disk = data.get("disk_info")
        host = data.get("host_info")
        return cls(
            cpu_info=[CpuInfo(**cpu) for cpu in data.get("cpu_info") or []],
            mem_info=MemoryInfo(**mem) if mem is not None else None,
            disk_info=DiskUsage(**disk) if disk is not None else None,
            host_info=HostInfo(**host) if host is not None else None,
            net_info=[NetIOCounters(**nic) for nic in data.get("net_info") or []],
        )
