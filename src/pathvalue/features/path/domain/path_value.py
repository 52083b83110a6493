"""
Summary: Immutable path value with lazily cached filesystem metadata.
Why: Combine lexical normalization, policy-aware comparison and single-probe metadata in one type.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Final, final

from pathvalue.config.settings import FOLLOW_SYMLINKS, PLATFORM_NAME
from pathvalue.features.path.adapters import FsPathEncoder, LocalClockDecoder, OsStatProvider
from pathvalue.features.path.domain import comparator
from pathvalue.features.path.domain.metadata import (
    FileKind,
    MetadataCache,
    MetadataRecord,
    ProbeState,
)
from pathvalue.features.path.domain.parser import is_separator, parse
from pathvalue.features.path.domain.policy import PlatformPolicy, policy_for_name
from pathvalue.features.path.usecases.ports import ClockDecoder, MetadataProvider, PathEncoder
from pathvalue.platform.logging import logger

DEFAULT_POLICY: Final[PlatformPolicy] = policy_for_name(PLATFORM_NAME)
DEFAULT_PROVIDER: Final[MetadataProvider] = OsStatProvider(follow_symlinks=FOLLOW_SYMLINKS)
DEFAULT_CLOCK: Final[ClockDecoder] = LocalClockDecoder()
DEFAULT_ENCODER: Final[PathEncoder] = FsPathEncoder()


@final
class PathValue:
    """A normalized filesystem path.

    The value is built from a raw string (or copied from another path value)
    and never changes afterwards. Equality, ordering and hashing look only at
    the policy and the compiled path under the policy's case rule; the
    metadata cache is excluded from all three. Metadata is fetched on the first accessor call
    and reused by every later one, including a failed lookup.

    Args:
        source: Raw path string, another ``PathValue``, or nothing for the empty path.
        policy: Platform conventions; defaults to the configured policy.
        provider: Metadata provider; defaults to ``OsStatProvider``.
        clock: Timestamp decoder; defaults to local time.
        encoder: Native path encoder; defaults to ``os.fsencode`` on POSIX.
    """

    __slots__ = (
        "_cache",
        "_clock",
        "_encoder",
        "_full_path",
        "_policy",
        "_provider",
        "_root",
        "_segments",
    )

    separator: ClassVar[str] = DEFAULT_POLICY.separator

    _full_path: str
    _root: str
    _segments: tuple[str, ...]
    _policy: PlatformPolicy
    _provider: MetadataProvider
    _clock: ClockDecoder
    _encoder: PathEncoder
    _cache: MetadataCache

    def __init__(
        self,
        source: str | PathValue = "",
        *,
        policy: PlatformPolicy | None = None,
        provider: MetadataProvider | None = None,
        clock: ClockDecoder | None = None,
        encoder: PathEncoder | None = None,
    ) -> None:
        if isinstance(source, PathValue):
            base_policy = source._policy
            base_provider = source._provider
            base_clock = source._clock
            base_encoder = source._encoder
        elif isinstance(source, str):
            base_policy = DEFAULT_POLICY
            base_provider = DEFAULT_PROVIDER
            base_clock = DEFAULT_CLOCK
            base_encoder = DEFAULT_ENCODER
        else:
            raise TypeError(
                f"PathValue expects a str or PathValue, got {type(source).__name__}"
            )

        resolved_policy = policy if policy is not None else base_policy
        if isinstance(source, PathValue) and resolved_policy == source._policy:
            parsed = (source._full_path, source._root, source._segments)
        else:
            parsed = parse(str(source), resolved_policy)

        full_path, root, segments = parsed
        object.__setattr__(self, "_full_path", full_path)
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_segments", segments)
        object.__setattr__(self, "_policy", resolved_policy)
        object.__setattr__(self, "_provider", provider if provider is not None else base_provider)
        object.__setattr__(self, "_clock", clock if clock is not None else base_clock)
        object.__setattr__(self, "_encoder", encoder if encoder is not None else base_encoder)
        object.__setattr__(self, "_cache", MetadataCache())

    # Parsed fields -------------------------------------------------------------

    @property
    def full_path(self) -> str:
        return self._full_path

    @property
    def root(self) -> str:
        return self._root

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def policy(self) -> PlatformPolicy:
        return self._policy

    @property
    def probe_state(self) -> ProbeState:
        """Where the metadata cache stands; does not trigger a probe."""

        return self._cache.state

    @staticmethod
    def is_separator(char: str) -> bool:
        """Return True for ``/`` and ``\\``."""

        return is_separator(char)

    def is_empty(self) -> bool:
        return not self._full_path

    # Metadata ------------------------------------------------------------------

    def _fetch(self) -> MetadataRecord | None:
        """Run the single provider call behind the cache."""

        try:
            encoded = self._encoder.encode(self._full_path)
        except UnicodeEncodeError as exc:
            logger.debug(
                "Probe failed",
                extra={"probe_event": "probe.failure", "path": self._full_path, "error_message": str(exc)},
            )
            return None

        record = self._provider.stat(encoded)
        if record is None:
            logger.debug(
                "Probe failed",
                extra={"probe_event": "probe.failure", "path": self._full_path},
            )
        else:
            logger.debug(
                "Probe ok",
                extra={
                    "probe_event": "probe.success",
                    "path": self._full_path,
                    "kind": record.kind.value,
                    "size": record.size,
                },
            )
        return record

    def _metadata(self) -> MetadataRecord | None:
        if not self._full_path or not self._cache.probe(self._fetch):
            return None
        return self._cache.record

    def _is_kind(self, kind: FileKind) -> bool:
        if not self._policy.supports(kind):
            return False
        record = self._metadata()
        return record is not None and record.kind is kind

    def exists(self) -> bool:
        """Return True if the path exists on the filesystem."""

        return self._metadata() is not None

    def is_dir(self) -> bool:
        return self._is_kind(FileKind.DIRECTORY)

    def is_file(self) -> bool:
        return self._is_kind(FileKind.REGULAR)

    def is_symlink(self) -> bool:
        """Return True for a symbolic link.

        Only observable with a provider that does not follow links.
        """

        return self._is_kind(FileKind.SYMLINK)

    def is_socket(self) -> bool:
        return self._is_kind(FileKind.SOCKET)

    def is_fifo(self) -> bool:
        return self._is_kind(FileKind.FIFO)

    def is_char_device(self) -> bool:
        return self._is_kind(FileKind.CHAR_DEVICE)

    def is_block_device(self) -> bool:
        return self._is_kind(FileKind.BLOCK_DEVICE)

    def size(self) -> int | None:
        """Return the size in bytes, or None when metadata is unavailable."""

        record = self._metadata()
        return record.size if record is not None else None

    def last_access(self) -> datetime | None:
        record = self._metadata()
        return self._clock.decode(record.access_time) if record is not None else None

    def last_modified(self) -> datetime | None:
        record = self._metadata()
        return self._clock.decode(record.modify_time) if record is not None else None

    # Comparison ----------------------------------------------------------------

    def equals(self, other: PathValue) -> bool:
        """Values built under different policies are never equal."""

        if self._policy != other._policy:
            return False
        return comparator.equals(self._full_path, other._full_path, self._policy)

    def compare(self, other: PathValue) -> int:
        """Three-way comparison returning -1, 0 or 1.

        Values under different policies are ordered by policy first.
        """

        if self._policy != other._policy:
            return -1 if self._policy.sort_key() < other._policy.sort_key() else 1
        return comparator.compare(self._full_path, other._full_path, self._policy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(
            (self._policy.sort_key(), comparator.compare_key(self._full_path, self._policy))
        )

    # Python protocols ----------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(self._full_path)

    def __str__(self) -> str:
        return self._full_path

    def __fspath__(self) -> str:
        return self._full_path

    def __repr__(self) -> str:
        return f"PathValue({self._full_path!r})"

    def __copy__(self) -> PathValue:
        return PathValue(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> PathValue:
        return PathValue(self)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"PathValue is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"PathValue is immutable: cannot delete '{name}'")


__all__ = [
    "DEFAULT_CLOCK",
    "DEFAULT_ENCODER",
    "DEFAULT_POLICY",
    "DEFAULT_PROVIDER",
    "PathValue",
]
