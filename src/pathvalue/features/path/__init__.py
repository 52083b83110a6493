# Path: `src/pathvalue/features/path/__init__.py`
# Summary: Export path feature domain, port, and adapter symbols.
# Why: Provide a stable import surface for callers and tests.

from .domain.comparator import compare, compare_key, equals
from .domain.metadata import FileKind, MetadataCache, MetadataRecord, ProbeState
from .domain.parser import ParsedPath, append_part, compile_path, is_separator, parse
from .domain.path_value import PathValue
from .domain.policy import (
    POSIX_POLICY,
    WINDOWS_POLICY,
    PlatformPolicy,
    UnknownPlatformPolicyError,
    native_policy,
    policy_for_name,
)
from .adapters import FsPathEncoder, LocalClockDecoder, OsStatProvider
from .usecases.ports import ClockDecoder, MetadataProvider, PathEncoder, ProbeResult

__all__ = [
    "PathValue",
    "ParsedPath",
    "parse",
    "append_part",
    "compile_path",
    "is_separator",
    "compare",
    "compare_key",
    "equals",
    "FileKind",
    "MetadataCache",
    "MetadataRecord",
    "ProbeState",
    "PlatformPolicy",
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "UnknownPlatformPolicyError",
    "native_policy",
    "policy_for_name",
    "ClockDecoder",
    "MetadataProvider",
    "PathEncoder",
    "ProbeResult",
    "FsPathEncoder",
    "LocalClockDecoder",
    "OsStatProvider",
]
