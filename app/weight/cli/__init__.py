"""CLI package for weight.

This package contains the Typer application and its report printers.
"""

from weight.cli.main import app

__all__ = ["app"]
