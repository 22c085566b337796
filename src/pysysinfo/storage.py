"""JSON persistence of system snapshots."""

import json
import logging
from pathlib import Path

from pysysinfo.errors import PersistenceError
from pysysinfo.models import SystemSnapshot

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("system-info.json")


def save_snapshot(
    snapshot: SystemSnapshot, path: Path = DEFAULT_OUTPUT_PATH
) -> Path:
    """
    Write the snapshot as indented JSON, replacing any existing file.

    The snapshot is encoded before the file is opened, so an encoding
    failure leaves an existing file untouched.

    Raises:
        PersistenceError: If encoding or writing fails.
    """
    path = Path(path)
    try:
        payload = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise PersistenceError("encode", path, exc) from exc

    try:
        with path.open("w", encoding="utf-8") as fh:
            fh.write(payload)
    except OSError as exc:
        raise PersistenceError("write", path, exc) from exc

    logger.debug("Wrote %d bytes to %s", len(payload), path)
    return path


def load_snapshot(path: Path = DEFAULT_OUTPUT_PATH) -> SystemSnapshot:
    """Read a snapshot previously written by save_snapshot."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PersistenceError("read", path, exc) from exc

    try:
        return SystemSnapshot.from_dict(json.loads(text))
    except (TypeError, ValueError, AttributeError) as exc:
        raise PersistenceError("decode", path, exc) from exc
