"""Aggregation of per-file outcomes into a run summary."""

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from weight.scanning.models import SizedFile, SizeOutcome


@dataclass(frozen=True, slots=True)
class Summary:
    """Totals for one run.

    Python integers are unbounded, so ``total_bytes`` cannot overflow.

    Attributes:
        total_bytes: Sum of the sizes of all successfully measured files.
        files_processed: Number of files measured successfully.
        error_count: Number of files whose metadata could not be read.
    """

    total_bytes: int = 0
    files_processed: int = 0
    error_count: int = 0

    @property
    def file_count(self) -> int:
        """Total number of file entries, successful or not."""
        return self.files_processed + self.error_count

    @classmethod
    def empty(cls) -> "Summary":
        """Return the identity summary (no files)."""
        return cls()

    @classmethod
    def of(cls, outcome: SizeOutcome) -> "Summary":
        """Summarize a single outcome."""
        if isinstance(outcome, SizedFile):
            return cls(total_bytes=outcome.size_bytes, files_processed=1)
        return cls(error_count=1)

    def combine(self, other: "Summary") -> "Summary":
        """Merge two partial summaries.

        The operation is associative and commutative, so partial results
        can be combined in any grouping or order.
        """
        return Summary(
            total_bytes=self.total_bytes + other.total_bytes,
            files_processed=self.files_processed + other.files_processed,
            error_count=self.error_count + other.error_count,
        )

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[SizeOutcome]) -> "Summary":
        """Fold a collection of outcomes into a summary.

        Args:
            outcomes: Per-file results from the size collector.

        Returns:
            Summary covering every outcome exactly once.
        """
        return reduce(cls.combine, (cls.of(o) for o in outcomes), cls.empty())
