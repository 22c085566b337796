"""Console rendering of a system snapshot with rich tables."""

import platform

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pysysinfo.models import (
    CpuInfo,
    DiskUsage,
    HostInfo,
    MemoryInfo,
    NetIOCounters,
    SystemSnapshot,
)

TITLE_STYLE = "bold cyan"
SECTION_STYLE = "green"
VALUE_STYLE = "yellow"


def format_percent(value: float) -> str:
    """Format a percentage with two decimals, e.g. 50.00%."""
    return f"{value:.2f}%"


def _new_table(*headers: str) -> Table:
    table = Table(show_lines=False, header_style="bold")
    for header in headers:
        table.add_column(header, overflow="fold")
    return table


def build_host_table(host: HostInfo) -> Table:
    """Build the two-column host property table."""
    table = _new_table("Property", "Value")
    table.add_row("Hostname", escape(host.hostname))
    table.add_row("OS", escape(host.os))
    table.add_row("Platform", escape(host.platform))
    table.add_row("Platform Family", escape(host.platform_family))
    table.add_row("Platform Version", escape(host.platform_version))
    table.add_row("Kernel Version", escape(host.kernel_version))
    table.add_row("Kernel Arch", escape(host.kernel_arch))
    table.add_row("Uptime", f"{host.uptime} seconds")
    table.add_row("Boot Time", str(host.boot_time))
    table.add_row("Procs", str(host.procs))
    return table


def build_cpu_table(cpus: list[CpuInfo]) -> Table:
    """Build the per-core CPU table."""
    table = _new_table("CPU", "Model Name", "Cores", "Mhz")
    for cpu in cpus:
        table.add_row(str(cpu.cpu), escape(cpu.model_name), str(cpu.cores), f"{cpu.mhz:.2f}")
    return table


def build_memory_table(mem: MemoryInfo) -> Table:
    table = _new_table("Total", "Available", "Used", "Used Percent")
    table.add_row(
        str(mem.total),
        str(mem.available),
        str(mem.used),
        format_percent(mem.used_percent),
    )
    return table


def build_disk_table(disk: DiskUsage) -> Table:
    table = _new_table("Path", "Total", "Free", "Used", "Used Percent")
    table.add_row(
        escape(disk.path),
        str(disk.total),
        str(disk.free),
        str(disk.used),
        format_percent(disk.used_percent),
    )
    return table


def build_network_table(nics: list[NetIOCounters]) -> Table:
    """Build the per-interface network counters table."""
    table = _new_table(
        "Name", "Bytes Sent", "Bytes Received", "Packets Sent", "Packets Received"
    )
    for nic in nics:
        table.add_row(
            escape(nic.name),
            str(nic.bytes_sent),
            str(nic.bytes_recv),
            str(nic.packets_sent),
            str(nic.packets_recv),
        )
    return table


def render_snapshot(snapshot: SystemSnapshot, console: Console | None = None) -> None:
    """
    Print every section of the snapshot to the console.

    Args:
        snapshot: A fully collected snapshot.
        console: Where to print. Defaults to a new stdout console.

    Raises:
        ValueError: If memory, disk or host info is missing.
    """
    if not snapshot.is_complete:
        raise ValueError("cannot render an incomplete system snapshot")

    console = console or Console()

    console.print("\nSystem Information", style=TITLE_STYLE)

    sections = [
        ("Host Information:", build_host_table(snapshot.host_info)),
        ("CPU Information:", build_cpu_table(snapshot.cpu_info)),
        ("Memory Information:", build_memory_table(snapshot.mem_info)),
        ("Disk Information:", build_disk_table(snapshot.disk_info)),
        ("Network Information:", build_network_table(snapshot.net_info)),
    ]
    for header, table in sections:
        console.print(f"\n{header}", style=SECTION_STYLE)
        console.print(table)

    console.print("\nPython Version:", style=SECTION_STYLE)
    console.print(platform.python_version(), style=VALUE_STYLE)
