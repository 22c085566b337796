"""Shared fixtures for pysysinfo tests."""

import pytest

from pysysinfo.models import (
    CpuInfo,
    DiskUsage,
    HostInfo,
    MemoryInfo,
    NetIOCounters,
    SystemSnapshot,
)


@pytest.fixture
def snapshot() -> SystemSnapshot:
    """A fully populated snapshot with known literal values."""
    return SystemSnapshot(
        cpu_info=[
            CpuInfo(cpu=0, model_name="Test CPU @ 2.40GHz", cores=2, mhz=2400.0),
            CpuInfo(cpu=1, model_name="Test CPU @ 2.40GHz", cores=2, mhz=2399.5),
        ],
        mem_info=MemoryInfo(total=1000, available=400, used=500, used_percent=50.0),
        disk_info=DiskUsage(path="/", total=2000, free=1500, used=500, used_percent=25.0),
        host_info=HostInfo(
            hostname="testhost",
            os="linux",
            platform="ubuntu",
            platform_family="debian",
            platform_version="24.04",
            kernel_version="6.8.0-31-generic",
            kernel_arch="x86_64",
            uptime=3600,
            boot_time=1700000000,
            procs=123,
        ),
        net_info=[
            NetIOCounters(
                name="lo", bytes_sent=10, bytes_recv=10, packets_sent=1, packets_recv=1
            ),
            NetIOCounters(
                name="eth0",
                bytes_sent=123456,
                bytes_recv=654321,
                packets_sent=100,
                packets_recv=200,
            ),
        ],
    )
