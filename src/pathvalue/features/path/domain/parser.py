"""
Summary: Lexical parsing of raw path strings into root, segments and compiled form.
Why: Give every path value one canonical spelling without touching the filesystem.
"""

from __future__ import annotations

from typing import NamedTuple

from pathvalue.features.path.domain.policy import PlatformPolicy

CURRENT_DIR: str = "."
PARENT_DIR: str = ".."


class ParsedPath(NamedTuple):
    """Output of ``parse``; ``full_path`` is always ``compile_path(root, segments)``."""

    full_path: str
    root: str
    segments: tuple[str, ...]


EMPTY: ParsedPath = ParsedPath("", "", ())


def is_separator(char: str) -> bool:
    """Return True for either path separator, on every platform."""

    return char == "/" or char == "\\"


def append_part(part: str, segments: list[str]) -> None:
    """Fold one candidate segment into ``segments``.

    ``..`` cancels the previous segment and is dropped when there is none,
    so ``../x`` normalizes to ``x``. ``.`` is always dropped. Empty
    candidates are ignored.
    """

    if not part or part == CURRENT_DIR:
        return
    if part == PARENT_DIR:
        if segments:
            _ = segments.pop()
        return
    segments.append(part)


def compile_path(root: str, segments: list[str] | tuple[str, ...], separator: str) -> str:
    """Join ``root`` and ``segments`` with exactly one separator between parts."""

    result = root
    for segment in segments:
        if result and not is_separator(result[-1]):
            result += separator
        result += segment
    return result


def _split_root(source: str, policy: PlatformPolicy) -> tuple[str, int]:
    """Return ``(root, scan_start)``; ``scan_start == len(source)`` means root only.

    A separator root is spelled with the policy's own separator.
    """

    first = source[0]
    if policy.is_separator(first):
        return policy.separator, 1

    is_drive_letter = first.isascii() and first.isalpha()
    if policy.drive_letters and len(source) > 1 and is_drive_letter and source[1] == ":":
        if len(source) == 2:
            return source, 2
        if policy.is_separator(source[2]):
            return source[:2], 3

    return "", 0


def parse(source: str, policy: PlatformPolicy) -> ParsedPath:
    """Parse ``source`` into a ``ParsedPath``.

    Never fails: malformed or empty input yields a (possibly empty) result.

    Args:
        source: Raw path string.
        policy: Platform conventions for separators and drive roots.

    Returns:
        ParsedPath: Root, normalized segments and the compiled full path.
    """

    if not source:
        return EMPTY

    root, begin = _split_root(source, policy)
    if begin == len(source):
        return ParsedPath(root, root, ())

    segments: list[str] = []
    run_start = begin
    for index in range(begin, len(source)):
        if policy.is_separator(source[index]):
            append_part(source[run_start:index], segments)
            run_start = index + 1
    append_part(source[run_start:], segments)

    return ParsedPath(compile_path(root, segments, policy.separator), root, tuple(segments))


__all__ = [
    "CURRENT_DIR",
    "EMPTY",
    "PARENT_DIR",
    "ParsedPath",
    "append_part",
    "compile_path",
    "is_separator",
    "parse",
]
