"""Exception types raised by weight.

Only PatternSyntaxError and ConfigurationError are fatal for a run.
MetadataReadError is contained per file by the size collector.
"""

from pathlib import Path


class WeightError(Exception):
    """Base class for all weight errors."""


class PatternSyntaxError(WeightError):
    """A glob pattern is malformed.

    Attributes:
        pattern: The offending pattern, exactly as supplied.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern: {pattern!r}: {reason}")


class ConfigurationError(WeightError):
    """Run options are invalid (e.g. a non-positive worker count)."""


class MetadataReadError(WeightError):
    """Reading the metadata of a file failed.

    Attributes:
        path: File whose metadata could not be read.
        cause: Human-readable description of the underlying OS error.
    """

    def __init__(self, path: Path, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read metadata for: {path}: {cause}")
