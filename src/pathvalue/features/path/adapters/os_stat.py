"""src/pathvalue/features/path/adapters/os_stat.py
What: MetadataProvider backed by ``os.stat``.
Why: Keep the syscall and st_mode decoding in an adapter so the cache can be tested with fakes."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable

from pathvalue.features.path.domain.metadata import FileKind, MetadataRecord
from pathvalue.features.path.usecases.ports import MetadataProvider, ProbeResult
from pathvalue.platform.logging import logger

_MODE_TESTS: tuple[tuple[FileKind, Callable[[int], bool]], ...] = (
    (FileKind.DIRECTORY, stat.S_ISDIR),
    (FileKind.REGULAR, stat.S_ISREG),
    (FileKind.SYMLINK, stat.S_ISLNK),
    (FileKind.SOCKET, stat.S_ISSOCK),
    (FileKind.FIFO, stat.S_ISFIFO),
    (FileKind.CHAR_DEVICE, stat.S_ISCHR),
    (FileKind.BLOCK_DEVICE, stat.S_ISBLK),
)


def kind_from_mode(mode: int) -> FileKind:
    """Map an ``st_mode`` value onto a ``FileKind``."""

    for kind, test in _MODE_TESTS:
        if test(mode):
            return kind
    return FileKind.OTHER


class OsStatProvider(MetadataProvider):
    """Probe the local filesystem.

    With ``follow_symlinks`` left on, a link reports the kind of its target
    and ``is_symlink`` never matches; turn it off to inspect the link itself.
    """

    def __init__(self, *, follow_symlinks: bool = True) -> None:
        self._follow_symlinks: bool = follow_symlinks

    @property
    def follow_symlinks(self) -> bool:
        return self._follow_symlinks

    def stat(self, encoded_path: str | bytes) -> ProbeResult:
        try:
            result = os.stat(encoded_path, follow_symlinks=self._follow_symlinks)
        except (OSError, ValueError) as exc:
            # ValueError: embedded NUL character
            logger.debug("stat failed for %r: %s", encoded_path, exc)
            return None

        return MetadataRecord(
            kind=kind_from_mode(result.st_mode),
            size=result.st_size,
            access_time=result.st_atime,
            modify_time=result.st_mtime,
        )

    def __repr__(self) -> str:
        return f"OsStatProvider(follow_symlinks={self._follow_symlinks})"


__all__ = ["OsStatProvider", "kind_from_mode"]
