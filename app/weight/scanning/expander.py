"""Glob pattern expansion.

Turns a shell-style glob pattern into the filesystem paths it matches.
Supports ``*``, ``?``, ``[...]``/``[!...]`` character classes and ``**``
as a whole path component. Brace expansion is not supported: braces are
matched literally.
"""

import logging
import os
from collections.abc import Iterator, Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from weight.core.errors import PatternSyntaxError
from weight.scanning.models import PathEnumerationWarning, PatternMatches

logger = logging.getLogger(__name__)

_SEPARATOR = "/"
_RECURSIVE = "**"
_MAGIC_CHARS = frozenset("*?[")


def has_magic(component: str) -> bool:
    """Check if a path component contains glob wildcards."""
    return any(char in _MAGIC_CHARS for char in component)


def validate_pattern(pattern: str) -> None:
    """Check that a pattern is well-formed glob syntax.

    Args:
        pattern: Pattern to check.

    Raises:
        PatternSyntaxError: If the pattern is empty, has an unterminated
            character class, or uses ``**`` inside a path component.
    """
    if not pattern:
        raise PatternSyntaxError(pattern, "pattern is empty")

    for component in pattern.split(_SEPARATOR):
        if "**" in component and component != _RECURSIVE:
            raise PatternSyntaxError(
                pattern,
                f"recursive wildcards must form a single path component: {component!r}",
            )

    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            index = _class_end(pattern, index)
        index += 1


def _class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``."""
    index = start + 1
    if index < len(pattern) and pattern[index] == "!":
        index += 1
    # A ']' right after the opening bracket is a literal member of the class
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    while index < len(pattern) and pattern[index] != "]":
        if pattern[index] == _SEPARATOR:
            break
        index += 1

    if index >= len(pattern) or pattern[index] != "]":
        raise PatternSyntaxError(pattern, f"unterminated character class at position {start}")
    return index


def _split_pattern(pattern: str) -> tuple[str, list[str]]:
    """Split a pattern into its walk root and path components.

    Empty components (from doubled separators) are dropped and consecutive
    ``**`` components collapse into one.
    """
    root = _SEPARATOR if pattern.startswith(_SEPARATOR) else ""
    components: list[str] = []
    for component in pattern.split(_SEPARATOR):
        if not component:
            continue
        if component == _RECURSIVE and components and components[-1] == _RECURSIVE:
            continue
        components.append(component)
    return root, components


class PatternExpander:
    """Expands glob patterns by walking the filesystem.

    Expansion is read-only. Directory entries are visited in name order, so
    repeated runs over an unchanged tree produce the same paths in the same
    order. Directories that cannot be listed are recorded as warnings and
    skipped.

    Example:
        >>> matches = PatternExpander().expand("**/*.txt")
        >>> for path in matches.paths:
        ...     print(path)
    """

    def expand(self, pattern: str) -> PatternMatches:
        """Expand one pattern into its candidate paths.

        Args:
            pattern: Glob pattern to expand.

        Returns:
            PatternMatches holding the matched paths and any warnings.

        Raises:
            PatternSyntaxError: If the pattern is malformed.
        """
        validate_pattern(pattern)
        root, components = _split_pattern(pattern)

        warnings: list[PathEnumerationWarning] = []
        paths = tuple(Path(p) for p in self._walk(root, components, warnings) if p)

        logger.debug("Pattern %r matched %d paths", pattern, len(paths))
        # '**' can list the same directory more than once
        unique_warnings = tuple(dict.fromkeys(warnings))
        return PatternMatches(pattern=pattern, paths=paths, warnings=unique_warnings)

    def _walk(
        self,
        base: str,
        components: Sequence[str],
        warnings: list[PathEnumerationWarning],
    ) -> Iterator[str]:
        """Yield paths under ``base`` matching the remaining components.

        Args:
            base: Directory matched so far ("" for the working directory).
            components: Pattern components still to match.
            warnings: Collector for enumeration warnings.

        Yields:
            Matching path strings.
        """
        if not components:
            yield base
            return

        head, rest = components[0], components[1:]

        if head == _RECURSIVE:
            # Zero directories first, then every directory below base
            yield from self._walk(base, rest, warnings)
            for directory in self._descendant_dirs(base, warnings):
                yield from self._walk(directory, rest, warnings)
            return

        if not has_magic(head):
            candidate = _join(base, head)
            if rest:
                if os.path.isdir(candidate):
                    yield from self._walk(candidate, rest, warnings)
            elif os.path.lexists(candidate):
                yield candidate
            return

        for entry in self._list_dir(base, warnings):
            if not fnmatchcase(entry.name, head):
                continue
            candidate = _join(base, entry.name)
            if not rest:
                yield candidate
            elif _is_dir(entry):
                yield from self._walk(candidate, rest, warnings)

    def _descendant_dirs(
        self, base: str, warnings: list[PathEnumerationWarning]
    ) -> Iterator[str]:
        """Yield all directories below ``base``, depth first.

        Symlinked directories are followed. A symlink loop ends once the OS
        refuses to resolve the path (ELOOP), at which point the entry no
        longer reads as a directory.
        """
        for entry in self._list_dir(base, warnings):
            if _is_dir(entry):
                directory = _join(base, entry.name)
                yield directory
                yield from self._descendant_dirs(directory, warnings)

    @staticmethod
    def _list_dir(base: str, warnings: list[PathEnumerationWarning]) -> list[os.DirEntry[str]]:
        """List a directory sorted by name, recording failures as warnings."""
        directory = base or "."
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            cause = e.strerror or str(e)
            logger.debug("Cannot list directory %s: %s", directory, cause)
            warnings.append(PathEnumerationWarning(path=Path(directory), cause=cause))
            return []


def _join(base: str, name: str) -> str:
    """Join a path component onto a walk base."""
    if not base:
        return name
    if base.endswith(_SEPARATOR):
        return base + name
    return base + _SEPARATOR + name


def _is_dir(entry: os.DirEntry[str]) -> bool:
    """Check if a directory entry is a directory, following symlinks."""
    try:
        return entry.is_dir()
    except OSError:
        return False
