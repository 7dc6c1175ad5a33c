"""Run options for weight.

There is no configuration file: options come from the command line only
and are validated here before any work starts.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weight.core.errors import ConfigurationError


def default_worker_count() -> int:
    """Return the default worker pool size (number of available CPUs)."""
    return os.cpu_count() or 1


class RunOptions(BaseModel):
    """Validated options for one run.

    Attributes:
        patterns: Glob patterns to expand (at least one).
        threads: Worker pool size, or None for the CPU count.
        verbose: Print one line per measured file.
        debug: Print a diagnostic trace.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    patterns: list[str] = Field(min_length=1)
    threads: int | None = Field(default=None, ge=1)
    verbose: bool = False
    debug: bool = False

    @property
    def worker_count(self) -> int:
        """Effective worker pool size."""
        return self.threads if self.threads is not None else default_worker_count()

    @classmethod
    def create(cls, **values: object) -> "RunOptions":
        """Build options, translating validation failures.

        Raises:
            ConfigurationError: If any option is invalid.
        """
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    """Render a ValidationError as a one-line message."""
    parts: list[str] = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "options"
        if field == "threads":
            parts.append(f"Failed to set thread pool size: {item['msg']}")
        else:
            parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)
