"""Normalized, comparable filesystem path values with cached metadata."""

from pathvalue.features.path import (
    POSIX_POLICY,
    WINDOWS_POLICY,
    FileKind,
    MetadataRecord,
    PathValue,
    PlatformPolicy,
    ProbeState,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "FileKind",
    "MetadataRecord",
    "PathValue",
    "PlatformPolicy",
    "ProbeState",
    "parse",
]
