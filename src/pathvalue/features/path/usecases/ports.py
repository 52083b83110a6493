"""
Summary: Protocols for the collaborators a path value calls into.
Why: Let adapters satisfy stat, clock and encoding needs without coupling the domain to the OS.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, TypeAlias, runtime_checkable

from pathvalue.features.path.domain.metadata import MetadataRecord

ProbeResult: TypeAlias = MetadataRecord | None
"""A metadata record on success, ``None`` on failure."""


@runtime_checkable
class MetadataProvider(Protocol):
    """Look up metadata for an already encoded path."""

    def stat(self, encoded_path: str | bytes) -> ProbeResult:
        """Return the entry's metadata, or None when it is missing or inaccessible."""
        ...


@runtime_checkable
class ClockDecoder(Protocol):
    """Turn a raw OS timestamp into a calendar datetime."""

    def decode(self, raw_timestamp: float) -> datetime:
        """Return the datetime for ``raw_timestamp`` seconds since the epoch."""
        ...


@runtime_checkable
class PathEncoder(Protocol):
    """Convert the internal ``str`` path into the form the OS expects."""

    def encode(self, path: str) -> str | bytes:
        """Return the native representation of ``path``."""
        ...


__all__ = ["ClockDecoder", "MetadataProvider", "PathEncoder", "ProbeResult"]
