"""CLI entry point for license-policy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, cast

import click
from rich.console import Console
from rich.logging import RichHandler

from license_policy import __version__
from license_policy.config import build_catalog, load_config
from license_policy.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from license_policy.exceptions import ConfigurationError, LicensePolicyError
from license_policy.models.scan import CheckResult, ScanOptions, Verbosity
from license_policy.output.report_json import CheckJsonFormatter
from license_policy.output.terminal import TerminalFormatter
from license_policy.scanner import check_modules

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)


def _configure_logging(verbosity: Verbosity) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbosity: Output verbosity level selecting the log level.
    """
    if verbosity == Verbosity.QUIET:
        level = logging.WARNING
    elif verbosity == Verbosity.VERBOSE:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_error_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Policy - Check dependency licenses against project policy.

    Reads the license reports of your build tool, reconciles the licenses
    declared for each dependency and checks them against the allowed and
    denied licenses of your policy file.

    \b
    Examples:
        license-policy check
        license-policy check app lib
        license-policy check --format json
    """
    pass


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show representative licenses and debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the status line and violations.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to policy file.",
)
@click.argument(
    "modules",
    nargs=-1,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
def check(
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    modules: tuple[Path, ...],
) -> None:
    """Check dependency licenses of one or more modules.

    Each MODULE is a build root containing
    build/reports/dependency-license/license-details.json.
    Defaults to the current directory.

    \b
    Examples:
        license-policy check
        license-policy check app lib
        license-policy check --format json --output report.json
        license-policy check --config policy.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "json"], output_format.lower())
    options = ScanOptions(format=format_value, verbosity=verbosity)
    _configure_logging(verbosity)

    try:
        config = load_config(config_path)
        catalog = build_catalog(config)

        module_dirs = list(modules) or [Path.cwd()]
        result = check_modules(module_dirs, catalog, config.mappings)
        _display_result(result, options, output_path)

        if result.has_violations:
            sys.exit(EXIT_VIOLATIONS)
        sys.exit(EXIT_SUCCESS)

    except LicensePolicyError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except (OSError, PermissionError) as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {path}[/green]")


def _display_result(
    result: CheckResult, options: ScanOptions, output_path: str | None = None
) -> None:
    """Display check results in the specified format.

    Args:
        result: The check result to display.
        options: Options including format and verbosity.
        output_path: Optional file path to write output to.
    """
    if options.format == "json" or output_path:
        # Terminal format to file uses JSON instead
        content = CheckJsonFormatter().format_check_result(result)
    else:
        TerminalFormatter(
            console=_console, verbosity=options.verbosity
        ).format_check_result(result)
        return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicensePolicyError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{message}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
