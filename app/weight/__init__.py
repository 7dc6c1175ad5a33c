"""weight - total size of files matching glob patterns."""

__version__ = "1.0.0"
