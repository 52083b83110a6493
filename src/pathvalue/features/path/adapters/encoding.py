"""src/pathvalue/features/path/adapters/encoding.py
What: PathEncoder producing the OS native path representation.
Why: The internal path is ``str``; POSIX syscalls take filesystem-encoded bytes."""

from __future__ import annotations

import os

from pathvalue.features.path.usecases.ports import PathEncoder


class FsPathEncoder(PathEncoder):
    """Encode with ``os.fsencode`` on POSIX and pass ``str`` through on Windows."""

    def __init__(self, *, as_bytes: bool | None = None) -> None:
        self._as_bytes: bool = os.name != "nt" if as_bytes is None else as_bytes

    def encode(self, path: str) -> str | bytes:
        if self._as_bytes:
            return os.fsencode(path)
        return path


__all__ = ["FsPathEncoder"]
