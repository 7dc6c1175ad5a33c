"""Data models for the size pipeline.

This module defines the records that flow between the pipeline stages:
pattern matches, filter classifications, and per-file outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from weight.utils.formatting import display_path


class PathKind(str, Enum):
    """What a candidate path denotes at filter time.

    Attributes:
        FILE: Regular file (after resolving symlinks).
        DIRECTORY: Directory.
        MISSING: Path does not exist, or is a dangling symlink.
        UNREADABLE: Metadata could not be read for another reason.
        OTHER: Socket, FIFO, device or anything else that is not a file.
    """

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PathEnumerationWarning:
    """A directory that could not be listed while expanding a pattern.

    Attributes:
        path: Directory that could not be read.
        cause: Human-readable description of the failure.
    """

    path: Path
    cause: str

    @property
    def message(self) -> str:
        """Return the user-facing warning text."""
        return f"Error processing path: {display_path(self.path)}: {self.cause}"


@dataclass(frozen=True, slots=True)
class PatternMatches:
    """Candidate paths produced by expanding a single pattern.

    Attributes:
        pattern: The glob pattern that was expanded.
        paths: Matching paths in discovery order.
        warnings: Non-fatal enumeration problems met during expansion.
    """

    pattern: str
    paths: tuple[Path, ...]
    warnings: tuple[PathEnumerationWarning, ...] = ()

    @property
    def count(self) -> int:
        """Number of candidate paths matched."""
        return len(self.paths)


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of testing a candidate path against the filesystem.

    A classification with kind FILE is a file entry; every other kind is a
    skipped candidate and carries the reason it was skipped.
    """

    path: Path
    kind: PathKind
    reason: str | None = None

    @property
    def is_file(self) -> bool:
        """Check if the candidate denotes a regular file."""
        return self.kind == PathKind.FILE


@dataclass(frozen=True, slots=True)
class SizedFile:
    """A file whose byte length was read successfully.

    Attributes:
        path: Path of the file.
        size_bytes: File length in bytes.
    """

    path: Path
    size_bytes: int

    def __post_init__(self) -> None:
        """Validate sized file data after initialization."""
        if self.size_bytes < 0:
            msg = f"Size must be non-negative, got {self.size_bytes}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ProcessingError:
    """A file whose metadata could not be read.

    Attributes:
        path: Path of the file.
        cause: Human-readable description of the underlying error.
    """

    path: Path
    cause: str

    @property
    def message(self) -> str:
        """Return the user-facing error text."""
        return f"Failed to read metadata for: {display_path(self.path)}: {self.cause}"


SizeOutcome = SizedFile | ProcessingError
