"""Shared fakes and fixtures for path value tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pathvalue.features.path.domain.metadata import FileKind, MetadataRecord


class CountingProvider:
    """Metadata provider returning scripted records and recording every call."""

    def __init__(self, records: dict[str | bytes, MetadataRecord] | None = None) -> None:
        self.records: dict[str | bytes, MetadataRecord] = dict(records or {})
        self.calls: list[str | bytes] = []

    def stat(self, encoded_path: str | bytes) -> MetadataRecord | None:
        self.calls.append(encoded_path)
        return self.records.get(encoded_path)


class RaisingProvider:
    """Metadata provider whose lookups always raise ``OSError``."""

    def __init__(self) -> None:
        self.calls: int = 0

    def stat(self, encoded_path: str | bytes) -> MetadataRecord | None:
        self.calls += 1
        raise PermissionError(13, "Permission denied", encoded_path)


class BrokenProvider:
    """Metadata provider with a bug: raises something other than ``OSError``."""

    def __init__(self) -> None:
        self.calls: int = 0

    def stat(self, encoded_path: str | bytes) -> MetadataRecord | None:
        self.calls += 1
        raise RuntimeError("provider bug")


class IdentityEncoder:
    """Encoder handing the internal string straight to the provider."""

    def encode(self, path: str) -> str | bytes:
        return path


class UtcClock:
    """Clock decoder pinned to UTC."""

    def decode(self, raw_timestamp: float) -> datetime:
        return datetime.fromtimestamp(raw_timestamp, timezone.utc)


def make_record(kind: FileKind, size: int = 0, atime: float = 0.0, mtime: float = 0.0) -> MetadataRecord:
    return MetadataRecord(kind=kind, size=size, access_time=atime, modify_time=mtime)


@pytest.fixture
def provider() -> CountingProvider:
    """Provide a call-counting provider with a few scripted entries."""

    return CountingProvider(
        {
            "/etc": make_record(FileKind.DIRECTORY, size=4096),
            "/etc/passwd": make_record(
                FileKind.REGULAR, size=2048, atime=1_700_000_000.0, mtime=1_600_000_000.0
            ),
            "/tmp/link": make_record(FileKind.SYMLINK, size=12),
            "/run/app.sock": make_record(FileKind.SOCKET),
            "/run/pipe": make_record(FileKind.FIFO),
            "/dev/null": make_record(FileKind.CHAR_DEVICE),
            "/dev/sda": make_record(FileKind.BLOCK_DEVICE),
        }
    )


@pytest.fixture
def encoder() -> IdentityEncoder:
    return IdentityEncoder()


@pytest.fixture
def clock() -> UtcClock:
    return UtcClock()
