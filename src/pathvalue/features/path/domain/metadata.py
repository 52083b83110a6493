"""
Summary: Metadata records, entry kinds and the at-most-once probe cache.
Why: Pay for the underlying stat call once per path value and never retry failures.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from pathvalue.platform.logging import logger


class FileKind(str, Enum):
    """Filesystem entry type reported by a metadata provider."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    SYMLINK = "symlink"
    SOCKET = "socket"
    FIFO = "fifo"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class MetadataRecord:
    """Result of a successful probe.

    Timestamps are raw OS values (seconds since the epoch) and are turned
    into datetimes by a clock decoder only when asked for.
    """

    kind: FileKind
    size: int
    access_time: float
    modify_time: float


class ProbeState(str, Enum):
    """Lifecycle of a metadata cache; moves at most once away from UNINITIALIZED."""

    UNINITIALIZED = "uninitialized"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class MetadataCache:
    """Tri-state memo around a single metadata probe.

    The cache belongs to one path value and is not part of its identity.
    A lock guards the transition so concurrent callers share a single probe.
    """

    __slots__ = ("_lock", "_record", "_state")

    def __init__(self) -> None:
        self._lock: Final[threading.Lock] = threading.Lock()
        self._state: ProbeState = ProbeState.UNINITIALIZED
        self._record: MetadataRecord | None = None

    @property
    def state(self) -> ProbeState:
        return self._state

    @property
    def record(self) -> MetadataRecord | None:
        """Stored record; ``None`` unless the probe succeeded."""

        return self._record

    def probe(self, fetch: Callable[[], MetadataRecord | None]) -> bool:
        """Return True when metadata is available, calling ``fetch`` at most once.

        ``fetch`` reports failure by returning ``None``. Any exception escaping
        it is treated the same way, so a failing provider is never retried.
        """

        # Settled states are never left, so they can be read without the lock.
        if self._state is ProbeState.FAILED:
            return False
        if self._state is ProbeState.SUCCEEDED:
            return True

        with self._lock:
            if self._state is ProbeState.UNINITIALIZED:
                try:
                    record = fetch()
                except OSError:
                    record = None
                except Exception as exc:
                    logger.warning("Metadata provider raised %s: %s", type(exc).__name__, exc)
                    record = None
                if record is None:
                    self._state = ProbeState.FAILED
                else:
                    self._record = record
                    self._state = ProbeState.SUCCEEDED
            return self._state is ProbeState.SUCCEEDED

    def __repr__(self) -> str:
        return f"MetadataCache(state={self._state.value})"


__all__ = ["FileKind", "MetadataCache", "MetadataRecord", "ProbeState"]
