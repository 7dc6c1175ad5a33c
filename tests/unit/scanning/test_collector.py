"""Tests for file size collection."""

from pathlib import Path
from unittest.mock import patch

import pytest
from weight.core.errors import MetadataReadError
from weight.scanning.collector import collect_size, read_size
from weight.scanning.models import ProcessingError, SizedFile


class TestReadSize:
    """Tests for read_size."""

    def test_reads_byte_length(self, sample_tree: Path) -> None:
        """Returns the file length in bytes."""
        assert read_size(sample_tree / "b.txt") == 14

    def test_empty_file(self, tmp_path: Path) -> None:
        """Empty files have size zero."""
        path = tmp_path / "empty"
        path.touch()
        assert read_size(path) == 0

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A vanished file raises MetadataReadError naming the path."""
        path = tmp_path / "vanished.txt"

        with pytest.raises(MetadataReadError) as exc_info:
            read_size(path)

        assert exc_info.value.path == path
        assert exc_info.value.cause == "No such file or directory"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestCollectSize:
    """Tests for collect_size."""

    def test_success(self, sample_tree: Path) -> None:
        """A readable file yields a SizedFile."""
        path = sample_tree / "a.txt"
        assert collect_size(path) == SizedFile(path=path, size_bytes=10)

    def test_deleted_after_filtering(self, sample_tree: Path) -> None:
        """A file deleted before its size is read yields a ProcessingError."""
        path = sample_tree / "a.txt"
        path.unlink()

        outcome = collect_size(path)

        assert isinstance(outcome, ProcessingError)
        assert outcome.path == path
        assert outcome.cause == "No such file or directory"

    def test_permission_error(self, tmp_path: Path) -> None:
        """Any OS error is contained as a ProcessingError."""
        path = tmp_path / "secret"
        error = PermissionError(13, "Permission denied")

        with patch.object(Path, "stat", side_effect=error):
            outcome = collect_size(path)

        assert outcome == ProcessingError(path=path, cause="Permission denied")
