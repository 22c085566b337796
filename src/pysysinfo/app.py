"""pysysinfo - collect, print and save system information."""

import logging
import sys
from pathlib import Path

from rich.console import Console

from pysysinfo.collector import SystemInfoCollector
from pysysinfo.errors import CollectionError, PersistenceError
from pysysinfo.render import SECTION_STYLE, render_snapshot
from pysysinfo.storage import DEFAULT_OUTPUT_PATH, save_snapshot

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def run(
    collector: SystemInfoCollector | None = None,
    console: Console | None = None,
    output_path: Path = DEFAULT_OUTPUT_PATH,
) -> int:
    """
    Collect a snapshot, print it and save it to disk.

    This is the only place that decides to abort: the first collection or
    persistence failure is logged and turns into a non-zero exit status.
    Nothing is printed or written after a collection failure.

    Returns:
        Process exit status, 0 on success and 1 on failure.
    """
    collector = collector or SystemInfoCollector()
    console = console or Console()

    try:
        snapshot = collector.collect()
    except CollectionError as exc:
        logger.error("%s", exc)
        return 1

    render_snapshot(snapshot, console)

    try:
        saved = save_snapshot(snapshot, output_path)
    except PersistenceError as exc:
        logger.error("Error saving system info (%s): %s", exc.step, exc.cause)
        return 1

    console.print(f"\nJSON data saved to {saved.name}", style=SECTION_STYLE)
    return 0


def main() -> None:
    """Entry point for pysysinfo."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    sys.exit(run())


if __name__ == "__main__":
    main()
