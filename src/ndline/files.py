"""File reading and writing for NDJSON documents.

Reading returns the file as a list of raw byte lines with their
terminators intact; :func:`ndline.splitter.split_lines` owns terminator
handling, so file input and in-memory input go through the same rules.

Any OS-level failure is raised as :class:`ResourceError`.  That is an
environment problem, distinct from a bad line in the data, and is never
reported as a :class:`~ndline.codec.LineError`.
"""

from __future__ import annotations

from pathlib import Path


class ResourceError(OSError):
    """Raised when an NDJSON file cannot be opened, read, or written."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


def read_lines(path: Path) -> list[bytes]:
    """Return the lines of *path*, terminators preserved.

    Raises:
        ResourceError: the file is missing, unreadable, or not a file.
    """
    try:
        with path.open("rb") as fh:
            return list(fh)
    except OSError as exc:
        raise ResourceError(path, exc.strerror or str(exc)) from exc


def write_data(path: Path, data: bytes, *, append: bool = False) -> None:
    """Write already-encoded *data* to *path*, truncating it first unless *append* is set.

    Raises:
        ResourceError: the file cannot be opened or written.
    """
    mode = "ab" if append else "wb"
    try:
        with path.open(mode) as fh:
            fh.write(data)
    except OSError as exc:
        raise ResourceError(path, exc.strerror or str(exc)) from exc
