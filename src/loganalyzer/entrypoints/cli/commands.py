"""Analyzer subcommands: ``check``, ``analyze`` and ``seams``.

Per-file results go to stdout, one line per file, so they can be piped.
Configuration problems and missing names are reported on stderr and exit
with status 2.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from loganalyzer.bootstrap.bootstrap import DEFAULT_SEAM, AppContainer, bootstrap
from loganalyzer.config import ConfigError
from loganalyzer.domain.errors import LogAnalyzerError
from loganalyzer.service_layer.analyzers import SEAMS

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_USAGE = 2

seam_option = click.option(
    "--seam",
    type=click.Choice(list(SEAMS)),
    default=DEFAULT_SEAM,
    show_default=True,
    envvar="LOGANALYZER_SEAM",
    show_envvar=True,
    help="Dependency-injection seam used to assemble the analyzer.",
)


def _fail(exc: Exception) -> NoReturn:
    error(str(exc))
    raise click.exceptions.Exit(EXIT_USAGE)


def _bootstrap_or_exit(seam: str) -> AppContainer:
    try:
        return bootstrap(seam)
    except (ConfigError, LogAnalyzerError) as e:
        _fail(e)


@click.command()
@seam_option
@click.argument("file_names", nargs=-1, required=True)
@click.pass_context
def check(ctx: click.Context, seam: str, file_names: tuple[str, ...]) -> None:
    """Print whether each FILE_NAME is a valid log file name."""
    app = _bootstrap_or_exit(seam)
    logger.debug("check: seam=%s files=%d", seam, len(file_names))

    all_valid = True
    for name in file_names:
        try:
            valid = app.analyzer.is_valid_log_file_name(name)
        except (LogAnalyzerError, OSError) as e:
            _fail(e)
        click.echo(f"{name.strip()}\t{'valid' if valid else 'invalid'}")
        all_valid = all_valid and valid

    if not all_valid:
        ctx.exit(EXIT_INVALID)


@click.command()
@seam_option
@click.argument("file_names", nargs=-1, required=True)
def analyze(seam: str, file_names: tuple[str, ...]) -> None:
    """Analyze each FILE_NAME and report names that are too short."""
    app = _bootstrap_or_exit(seam)

    for name in file_names:
        try:
            result = app.analyzer.analyze(name)
        except (LogAnalyzerError, OSError) as e:
            _fail(e)
        flags = [
            "valid" if result.valid else "invalid",
            "too-short" if result.too_short else "ok-length",
        ]
        if result.reported:
            flags.append("reported")
        if result.emailed:
            flags.append("emailed")
        click.echo(f"{result.file_name}\t{','.join(flags)}")
        if result.too_short and not (result.reported or result.emailed):
            warn(f"{result.file_name}: report could not be delivered")

    success(f"Analyzed {len(file_names)} file(s) via the {seam} seam.")


@click.command()
def seams() -> None:
    """List the dependency-injection seams an analyzer can be built through."""
    for name in SEAMS:
        click.echo(name)
