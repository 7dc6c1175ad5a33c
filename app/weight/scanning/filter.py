"""Candidate path classification.

Keeps regular files and tags everything else with the reason it was
skipped. Classification happens before sizes are read, so a file can still
change or disappear in between; sizes are best effort at time of read.
"""

import logging
import stat
from pathlib import Path

from weight.scanning.models import Classification, PathKind

logger = logging.getLogger(__name__)


def classify_path(path: Path) -> Classification:
    """Determine whether a candidate path currently denotes a regular file.

    Symlinks are resolved. Never raises for non-file candidates.

    Args:
        path: Candidate path produced by pattern expansion.

    Returns:
        Classification with kind FILE for regular files, or another kind
        with the reason the path is skipped.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return _skipped(path, PathKind.MISSING, "does not exist")
    except OSError as e:
        return _skipped(path, PathKind.UNREADABLE, e.strerror or str(e))

    if stat.S_ISREG(mode):
        return Classification(path=path, kind=PathKind.FILE)
    if stat.S_ISDIR(mode):
        return _skipped(path, PathKind.DIRECTORY, "is a directory")
    return _skipped(path, PathKind.OTHER, "not a regular file")


def _skipped(path: Path, kind: PathKind, reason: str) -> Classification:
    logger.debug("Skipping %s: %s", path, reason)
    return Classification(path=path, kind=kind, reason=reason)
