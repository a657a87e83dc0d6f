"""Whole-file reading and writing in page-sized blocks."""

from __future__ import annotations

import os

PAGE_SIZE = 4096


def _opener(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def write_file(path: str | os.PathLike, data: bytes) -> None:
    """Write data to path, truncating it, in blocks of PAGE_SIZE bytes."""
    view = memoryview(data)
    with open(path, "wb", buffering=0, opener=_opener) as f:
        written = 0
        while written < len(view):
            written += f.write(view[written : written + PAGE_SIZE])


def read_file(path: str | os.PathLike) -> bytes:
    """Read the whole file at path in blocks of PAGE_SIZE bytes."""
    with open(path, "rb", buffering=0) as f:
        return b"".join(iter(lambda: f.read(PAGE_SIZE), b""))