"""File size collection.

Reads the byte length of confirmed files. Failures are turned into
ProcessingError records so one bad file never aborts the batch.
"""

import logging
from pathlib import Path

from weight.core.errors import MetadataReadError
from weight.scanning.models import ProcessingError, SizedFile, SizeOutcome

logger = logging.getLogger(__name__)


def read_size(path: Path) -> int:
    """Read the byte length of a file.

    Args:
        path: File to measure.

    Returns:
        Size in bytes.

    Raises:
        MetadataReadError: If the metadata cannot be read (file deleted,
            permission revoked, I/O error).
    """
    try:
        return path.stat().st_size
    except OSError as e:
        raise MetadataReadError(path, e.strerror or str(e)) from e


def collect_size(path: Path) -> SizeOutcome:
    """Measure one file, containing any failure.

    Args:
        path: File confirmed by the filter stage.

    Returns:
        SizedFile on success, ProcessingError if the metadata read failed.
    """
    try:
        size = read_size(path)
    except MetadataReadError as e:
        logger.debug("Metadata read failed for %s", path, exc_info=e)
        return ProcessingError(path=path, cause=e.cause)
    return SizedFile(path=path, size_bytes=size)
