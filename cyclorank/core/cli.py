import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from cyclorank.analysis import AnalysisRunner, exceeds_threshold
from cyclorank.core import cli_help as ch
from cyclorank.core import constants as cs
from cyclorank.formatters import ReportFormatter
from cyclorank.infrastructure import exceptions as ex
from cyclorank.parsers.go import GoSourceParser

from .config import settings

app = typer.Typer(
    name=cs.APP_NAME,
    help=ch.APP_DESCRIPTION,
    add_completion=False,
)

err_console = Console(stderr=True)


def style(
    text: str, color: cs.Color, modifier: cs.StyleModifier = cs.StyleModifier.BOLD
) -> str:
    """Applies Rich styling to a text string.

    Args:
        text (str): The text to style.
        color (cs.Color): The color to apply.
        modifier (cs.StyleModifier): The style modifier (e.g., 'bold').

    Returns:
        str: The Rich-formatted string.
    """
    if modifier == cs.StyleModifier.NONE:
        return f"[{color}]{text}[/{color}]"
    return f"[{modifier} {color}]{text}[/{modifier} {color}]"


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Routes loguru output to stderr so stdout only carries the report."""
    if quiet:
        level = cs.LOG_LEVEL_QUIET
    elif verbose:
        level = cs.LOG_LEVEL_VERBOSE
    else:
        level = settings.LOG_LEVEL.upper()
    logger.remove()
    logger.add(sys.stderr, format=cs.LOG_FORMAT, level=level)


@app.command()
def analyze(
    paths: list[Path] = typer.Argument(..., help=ch.HELP_PATHS, show_default=False),
    over: int | None = typer.Option(
        None, "--over", "-o", metavar="N", help=ch.HELP_OVER
    ),
    top: int | None = typer.Option(None, "--top", "-t", metavar="N", help=ch.HELP_TOP),
    avg: bool = typer.Option(False, "--avg", "-a", help=ch.HELP_AVG),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help=ch.HELP_RECURSIVE
    ),
    skip_tests: bool = typer.Option(False, "--skip-tests", help=ch.HELP_SKIP_TESTS),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help=ch.HELP_EXCLUDE
    ),
    output_format: cs.OutputFormat = typer.Option(
        cs.OutputFormat.TEXT, "--format", "-f", help=ch.HELP_FORMAT
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=ch.HELP_VERBOSE),
    quiet: bool = typer.Option(False, "--quiet", "-q", help=ch.HELP_QUIET),
) -> None:
    """
    Calculates the cyclomatic complexity of every Go function under PATHS.

    Args:
        paths (list[Path]): Files and directories to analyze.
        over (int | None): Complexity floor; also turns on the non-zero exit status.
        top (int | None): Maximum number of functions to show.
        avg (bool): Whether to print the average complexity.
        recursive (bool): Whether to descend into sub-directories.
        skip_tests (bool): Whether to ignore test files found in directories.
        exclude (list[str] | None): Directory names to skip while descending.
        output_format (cs.OutputFormat): Text lines or a JSON document.
        verbose (bool): Enable debug logging.
        quiet (bool): Only log errors.
    """
    _configure_logging(verbose, quiet)
    options = settings.resolve_report_options(
        over=over, top=top, avg=True if avg else None
    )

    try:
        runner = AnalysisRunner(
            GoSourceParser(),
            recursive=recursive or settings.RECURSIVE,
            skip_tests=skip_tests or settings.SKIP_TESTS,
            exclude_dirs=settings.EXCLUDE | frozenset(exclude or ()),
        )
        report = runner.report(paths, options)
    except ex.CycloRankError as e:
        err_console.print(style(escape(str(e)), cs.Color.RED))
        raise typer.Exit(cs.EXIT_ERROR) from e

    rendered = ReportFormatter.render(report, output_format)
    if rendered:
        typer.echo(rendered)

    if exceeds_threshold(report.ranked, options.over):
        raise typer.Exit(cs.EXIT_OVER_THRESHOLD)
