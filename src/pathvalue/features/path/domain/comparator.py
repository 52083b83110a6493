"""
Summary: Equality and three-way ordering of compiled paths under a case policy.
Why: Keep comparison, ordering and hashing consistent by deriving all three from one key.
"""

from __future__ import annotations

from pathvalue.features.path.domain.policy import PlatformPolicy


def compare_key(full_path: str, policy: PlatformPolicy) -> str:
    """Return the string that ordering, equality and hashing operate on."""

    return full_path if policy.case_sensitive else full_path.casefold()


def equals(a: str, b: str, policy: PlatformPolicy) -> bool:
    """Return True when both paths are empty or their keys match."""

    if not a:
        return not b
    return compare_key(a, policy) == compare_key(b, policy)


def compare(a: str, b: str, policy: PlatformPolicy) -> int:
    """Compare two compiled paths, returning -1, 0 or 1.

    The empty path sorts before every non-empty one.
    """

    if not a:
        return 0 if not b else -1
    if not b:
        return 1
    key_a = compare_key(a, policy)
    key_b = compare_key(b, policy)
    if key_a == key_b:
        return 0
    return -1 if key_a < key_b else 1


__all__ = ["compare", "compare_key", "equals"]
