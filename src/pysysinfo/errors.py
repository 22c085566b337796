"""Exceptions raised by pysysinfo."""

from pathlib import Path


class SysInfoError(Exception):
    """Base class for every pysysinfo failure."""


class CollectionError(SysInfoError):
    """An OS query for one metric category failed."""

    def __init__(self, category: str, cause: BaseException | str) -> None:
        self.category = category
        self.cause = cause
        super().__init__(f"Error fetching {category} info: {cause}")


class PersistenceError(SysInfoError):
    """Encoding, writing or reading the snapshot file failed."""

    def __init__(self, step: str, path: Path, cause: BaseException | str) -> None:
        self.step = step
        self.path = path
        self.cause = cause
        super().__init__(f"Error during {step} of {path}: {cause}")
