"""
Summary: Platform policies describing separators, roots, case rules and supported kinds.
Why: Write parsing and comparison once and select platform behaviour by injection.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Final

from pathvalue.features.path.domain.metadata import FileKind


class UnknownPlatformPolicyError(ValueError):
    """Raised when a policy name does not match any known platform."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown platform policy: {name}")
        self.name: str = name


@dataclass(slots=True, frozen=True)
class PlatformPolicy:
    """Platform conventions consumed by the parser, comparator and accessors."""

    name: str
    separator: str
    separators: frozenset[str] = field(default_factory=lambda: frozenset({"/", "\\"}))
    drive_letters: bool = False
    case_sensitive: bool = True
    supported_kinds: frozenset[FileKind] = field(default_factory=lambda: frozenset(FileKind))

    def is_separator(self, char: str) -> bool:
        """Return True when ``char`` splits path segments under this policy."""

        return char in self.separators

    def supports(self, kind: FileKind) -> bool:
        """Return True when ``kind`` exists as a concept on this platform."""

        return kind in self.supported_kinds

    def sort_key(self) -> tuple[str, str, bool, bool, tuple[str, ...], tuple[str, ...]]:
        """Total order over policies; equal keys iff equal policies."""

        return (
            self.name,
            self.separator,
            self.drive_letters,
            self.case_sensitive,
            tuple(sorted(self.separators)),
            tuple(sorted(kind.value for kind in self.supported_kinds)),
        )


POSIX_POLICY: Final[PlatformPolicy] = PlatformPolicy(name="posix", separator="/")

WINDOWS_POLICY: Final[PlatformPolicy] = PlatformPolicy(
    name="windows",
    separator="\\",
    drive_letters=True,
    case_sensitive=False,
    supported_kinds=frozenset({FileKind.DIRECTORY, FileKind.REGULAR}),
)

_POLICIES: Final[dict[str, PlatformPolicy]] = {
    POSIX_POLICY.name: POSIX_POLICY,
    WINDOWS_POLICY.name: WINDOWS_POLICY,
}


def native_policy() -> PlatformPolicy:
    """Return the policy matching the running interpreter."""

    return WINDOWS_POLICY if os.name == "nt" else POSIX_POLICY


def policy_for_name(name: str) -> PlatformPolicy:
    """Resolve a configured policy name; ``auto`` selects the native policy.

    Raises:
        UnknownPlatformPolicyError: If ``name`` is not ``auto``, ``posix`` or ``windows``.
    """

    normalized = name.strip().lower()
    if normalized == "auto":
        return native_policy()
    try:
        return _POLICIES[normalized]
    except KeyError:
        raise UnknownPlatformPolicyError(name) from None


__all__ = [
    "POSIX_POLICY",
    "PlatformPolicy",
    "UnknownPlatformPolicyError",
    "WINDOWS_POLICY",
    "native_policy",
    "policy_for_name",
]
