"""Size pipeline: pattern expansion, file filtering and size collection.

This package provides the pipeline stages, their data models and the
worker pool that runs them.
"""

from weight.scanning.collector import collect_size, read_size
from weight.scanning.expander import PatternExpander, validate_pattern
from weight.scanning.filter import classify_path
from weight.scanning.models import (
    Classification,
    PathEnumerationWarning,
    PathKind,
    PatternMatches,
    ProcessingError,
    SizedFile,
    SizeOutcome,
)
from weight.scanning.pipeline import PipelineResult, SizePipeline, candidate_paths
from weight.scanning.summary import Summary

__all__ = [
    "Classification",
    "PathEnumerationWarning",
    "PathKind",
    "PatternExpander",
    "PatternMatches",
    "PipelineResult",
    "ProcessingError",
    "SizeOutcome",
    "SizePipeline",
    "SizedFile",
    "Summary",
    "candidate_paths",
    "classify_path",
    "collect_size",
    "read_size",
    "validate_pattern",
]
