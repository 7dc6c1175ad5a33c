"""Main CLI application entry point.

Defines the Typer application: a single command that sums the sizes of
all files matching the given glob patterns.
"""

import logging
import os
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from weight import __version__
from weight.cli import display
from weight.core.errors import ConfigurationError, PatternSyntaxError
from weight.core.options import RunOptions
from weight.scanning.models import SizedFile
from weight.scanning.pipeline import SizePipeline
from weight.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)

EPILOG = (
    "[bold]Examples:[/bold]\n\n"
    "  weight '**/*.png' '**/*.jpg' '**/*.dds'\n\n"
    "  weight -v '*.png'\n\n"
    "  weight --threads 4 '**/*.py'\n\n"
    "Brace expansion is not supported: pass separate patterns instead."
)

app = typer.Typer(
    name="weight",
    help="Calculate total size of files matching glob patterns.",
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"weight version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    """Route package log records to stderr, at DEBUG level in debug mode."""
    package_logger = logging.getLogger("weight")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    if debug:
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.NOTSET)


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "Unknown"


@app.command(epilog=EPILOG)
def main(
    patterns: Annotated[
        list[str],
        typer.Argument(
            help="Glob patterns to match (quote them to stop the shell expanding them).",
            show_default=False,
        ),
    ],
    threads: Annotated[
        int | None,
        typer.Option(
            "--threads",
            "-t",
            help="Number of worker threads. Defaults to the number of CPUs.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print the size of every file.",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Print diagnostic information.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Calculate total size of files matching glob patterns.

    Per-file errors are reported but do not change the exit status.
    """
    _configure_logging(debug)

    try:
        options = RunOptions.create(
            patterns=patterns, threads=threads, verbose=verbose, debug=debug
        )
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    cwd = _current_dir()
    if options.debug:
        display.print_debug_header(cwd, options.patterns, options.worker_count)
        try:
            os.listdir(".")
        except OSError as e:
            display.print_directory_check(False, e.strerror or str(e))
            print_error(f"Cannot read current directory: {e.strerror or e}")
            raise typer.Exit(code=1) from e
        display.print_directory_check(True)

    try:
        pipeline = SizePipeline(workers=options.worker_count)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    with pipeline:
        try:
            result = pipeline.run(options.patterns)
        except PatternSyntaxError as e:
            logger.debug("Pattern expansion aborted", exc_info=e)
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

    for match in result.matches:
        if options.debug:
            display.print_pattern_trace(match)
        for warning in match.warnings:
            display.print_enumeration_warning(warning)

    if options.debug:
        display.print_candidates_total(len(result.classifications))
        for classification in result.classifications:
            display.print_classification(classification)

    if not result.files:
        display.print_no_files(options.debug, cwd)
        return

    display.print_progress(len(result.files))
    for outcome in result.outcomes:
        if isinstance(outcome, SizedFile):
            if options.verbose:
                display.print_file_line(outcome)
        else:
            display.print_processing_error(outcome)

    display.print_summary(result.summary)


if __name__ == "__main__":
    app()
