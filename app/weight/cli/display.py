"""Report rendering for the weight command.

Provides printers for verbose file lines, per-file errors, the final
summary block, the no-files notice and the debug trace.
"""

from rich.markup import escape

from weight.scanning.models import (
    Classification,
    PathEnumerationWarning,
    PatternMatches,
    ProcessingError,
    SizedFile,
)
from weight.scanning.summary import Summary
from weight.utils.formatting import (
    console,
    display_path,
    format_size,
    print_error,
    print_info,
    print_warning,
)


def print_file_line(sized: SizedFile) -> None:
    """Print one verbose line: the file path and its scaled size."""
    console.print(
        f"[path]{escape(display_path(sized.path))}[/]: [size]{format_size(sized.size_bytes)}[/]",
        soft_wrap=True,
    )


def print_processing_error(error: ProcessingError) -> None:
    """Print a per-file metadata error to stderr."""
    print_error(escape(error.message))


def print_enumeration_warning(warning: PathEnumerationWarning) -> None:
    """Print a pattern expansion warning to stderr."""
    print_warning(escape(warning.message))


def print_progress(file_count: int) -> None:
    """Announce how many files are about to be measured."""
    console.print(f"[success]Found[/] [count]{file_count}[/] files, calculating sizes...")


def print_summary(summary: Summary) -> None:
    """Print the final summary block.

    The error line is only shown when at least one file failed.

    Args:
        summary: Totals for the run.
    """
    console.print("\n[header]--- Summary ---[/]")
    console.print(f"[success]Files processed[/]: [count]{summary.files_processed}[/]")
    if summary.error_count:
        console.print(f"[error]Errors[/]: [error]{summary.error_count}[/]")
    console.print(f"[success]Total size[/]: [total]{format_size(summary.total_bytes)}[/]")


def print_no_files(debug: bool, cwd: str) -> None:
    """Print the notice shown when no files matched.

    Args:
        debug: Whether to print troubleshooting suggestions.
        cwd: Working directory to mention in the suggestions.
    """
    console.print("[warning]No files found matching the patterns[/]")

    if not debug:
        print_info("Tip: Use --debug flag for debug information")
        return

    console.print("\n[header]Debug suggestions:[/]")
    console.print(f"• Current directory: [warning]{escape(display_path(cwd))}[/]", soft_wrap=True)
    console.print("• Try running from the directory where your files are located")
    console.print("• Check if the file extensions are correct")
    console.print(
        "• Brace expansion is not supported, use separate patterns: "
        "[hint.good]**/*.png **/*.jpg[/] instead of [hint.bad]**/*.{png,jpg}[/]"
    )
    console.print("• Try a simpler pattern like [hint.good]*.png[/] or [hint.good]./**/*.png[/]")
    console.print("• Check directory permissions with: [count]ls -la[/]")


# =============================================================================
# Debug trace
# =============================================================================


def print_debug_header(cwd: str, patterns: list[str], workers: int) -> None:
    """Print the working directory, arguments and pool size."""
    console.print(
        f"[info]Current directory[/]: [path]{escape(display_path(cwd))}[/]", soft_wrap=True
    )
    console.print(f"[info]Arguments[/]: {escape(repr(patterns))}", soft_wrap=True)
    console.print(f"[info]Worker threads[/]: [count]{workers}[/]")


def print_directory_check(readable: bool, detail: str = "") -> None:
    """Print whether the working directory can be listed."""
    if readable:
        console.print("[added]✓[/]: Current directory is readable")
    else:
        console.print(f"[skipped]✗[/]: Cannot read current directory: {escape(detail)}")


def print_pattern_trace(matches: PatternMatches) -> None:
    """Print the paths one pattern matched and their count."""
    pattern = escape(display_path(matches.pattern))
    console.print(f"[warning]Processing pattern[/]: [count]{pattern}[/]", soft_wrap=True)
    for path in matches.paths:
        console.print(f"  [info]Found path:[/] {escape(display_path(path))}", soft_wrap=True)
    console.print(
        f"  [success]Found[/] [count]{matches.count}[/] paths from pattern: [count]{pattern}[/]",
        soft_wrap=True,
    )


def print_candidates_total(count: int) -> None:
    """Print the number of candidates about to be filtered."""
    console.print(f"[success]Total[/] [count]{count}[/] candidate paths, filtering files...")


def print_classification(classification: Classification) -> None:
    """Print one filter decision."""
    path = escape(display_path(classification.path))
    if classification.is_file:
        console.print(f"    [added]✓[/] {path} (added)", soft_wrap=True)
    else:
        reason = escape(classification.reason or classification.kind.value)
        console.print(f"    [skipped]✗[/] {path} (skipped: {reason})", soft_wrap=True)

