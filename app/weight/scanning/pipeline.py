"""Parallel size pipeline.

Runs pattern expansion, file filtering and size collection on a fixed-size
thread pool. Each stage completes before the next starts, and results keep
input order. Totals are reduced after collection, so workers never share a
mutable counter.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from weight.core.errors import ConfigurationError
from weight.core.options import default_worker_count
from weight.scanning.collector import collect_size
from weight.scanning.expander import PatternExpander
from weight.scanning.filter import classify_path
from weight.scanning.models import Classification, PatternMatches, SizeOutcome
from weight.scanning.summary import Summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Everything one pipeline run produced.

    Attributes:
        matches: Expansion result per pattern, in pattern order.
        classifications: Filter decision per candidate path.
        outcomes: Size outcome per file entry.
        summary: Totals over all outcomes.
    """

    matches: tuple[PatternMatches, ...]
    classifications: tuple[Classification, ...]
    outcomes: tuple[SizeOutcome, ...]
    summary: Summary

    @property
    def files(self) -> tuple[Path, ...]:
        """Candidate paths that were confirmed as regular files."""
        return tuple(c.path for c in self.classifications if c.is_file)


def candidate_paths(matches: Iterable[PatternMatches]) -> list[Path]:
    """Concatenate candidates from all patterns.

    Paths matched by more than one pattern appear once per match; they are
    not de-duplicated.
    """
    return [path for match in matches for path in match.paths]


class SizePipeline:
    """Computes file sizes for glob patterns on a worker pool.

    Args:
        workers: Worker pool size. Defaults to the number of CPUs.
        expander: Pattern expander to use. Defaults to PatternExpander().

    Raises:
        ConfigurationError: If ``workers`` is not a positive integer.

    Example:
        >>> with SizePipeline(workers=4) as pipeline:
        ...     result = pipeline.run(["**/*.png", "**/*.jpg"])
        >>> result.summary.total_bytes
    """

    def __init__(
        self,
        workers: int | None = None,
        *,
        expander: PatternExpander | None = None,
    ) -> None:
        if workers is None:
            workers = default_worker_count()
        if workers < 1:
            msg = f"Failed to set thread pool size: expected a positive worker count, got {workers}"
            raise ConfigurationError(msg)

        self._workers = workers
        self._expander = expander or PatternExpander()
        self._pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="weight")
        logger.debug("Worker pool started with %d threads", workers)

    @property
    def workers(self) -> int:
        """Size of the worker pool."""
        return self._workers

    def expand(self, patterns: Sequence[str]) -> list[PatternMatches]:
        """Expand all patterns in parallel.

        Raises:
            PatternSyntaxError: If any pattern is malformed. The whole run
                aborts.
        """
        return list(self._pool.map(self._expander.expand, patterns))

    def classify(self, paths: Sequence[Path]) -> list[Classification]:
        """Classify all candidate paths in parallel."""
        return list(self._pool.map(classify_path, paths))

    def collect(self, files: Sequence[Path]) -> list[SizeOutcome]:
        """Read the size of every file in parallel."""
        return list(self._pool.map(collect_size, files))

    def run(self, patterns: Sequence[str]) -> PipelineResult:
        """Run all stages and reduce the outcomes.

        Args:
            patterns: Glob patterns to measure.

        Returns:
            PipelineResult with per-stage results and the summary.

        Raises:
            PatternSyntaxError: If any pattern is malformed.
        """
        matches = self.expand(patterns)
        classifications = self.classify(candidate_paths(matches))
        files = [c.path for c in classifications if c.is_file]
        outcomes = self.collect(files)

        return PipelineResult(
            matches=tuple(matches),
            classifications=tuple(classifications),
            outcomes=tuple(outcomes),
            summary=Summary.from_outcomes(outcomes),
        )

    def close(self) -> None:
        """Shut down the worker pool."""
        self._pool.shutdown(wait=True)

    def __enter__(self) -> "SizePipeline":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
