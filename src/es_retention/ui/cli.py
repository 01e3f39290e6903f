"""Command-line interface for es-retention.

Examples:
    es-retention --url http://localhost:9200 --index-prefix zis-audit- --older-than 25m
    es-retention --url http://localhost:9200 \\
        --index-prefix kafka-zis-external-orders-notify- \\
        --date-pattern week --older-than 21m --no-dryrun

Nothing is deleted unless ``--no-dryrun`` is given.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from es_retention import __version__
from es_retention.config import (
    ConfigError,
    RetentionConfig,
    build_retention_config,
    load_app_config,
)
from es_retention.config.validators import validate_log_level
from es_retention.index_client import HttpIndexClient, IndexClientError
from es_retention.orchestrator import DeleteOutcome, RunReport, run_retention
from es_retention.retention.types import DatePattern
from es_retention.telemetry import configure_logging, get_logger
from es_retention.telemetry.events import CONFIG_INVALID, RETENTION_RUN_FAILED

log = get_logger(__name__)

EXIT_OK = 0
EXIT_LISTING_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_DELETE_FAILED = 3

app = typer.Typer(
    help="Delete old indices by name (monthly or weekly patterns).",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


def create_store(config: RetentionConfig) -> HttpIndexClient:
    """Build the HTTP index client for a run."""
    return HttpIndexClient(
        config.url,
        index_prefix=config.index_prefix,
        auth=config.auth,
        timeout_seconds=config.timeout_seconds,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"es-retention {__version__}")
        raise typer.Exit()


def _print_dry_run(report: RunReport) -> None:
    """Print the indices a live run would delete, one full name per line."""
    console.print(f"Dry run: would delete {len(report.candidates)} indices (oldest first):")
    for candidate in report.candidates:
        name = escape(candidate.index)
        console.print(
            f"  {candidate.date}  {candidate.age_months:>4} months  [cyan]{name}[/cyan]",
            soft_wrap=True,
        )
    console.print("[dim]Re-run with --no-dryrun to delete them.[/dim]")


def _print_live(report: RunReport) -> None:
    """Print one line per deletion and a summary."""
    for result in report.results:
        index = escape(result.candidate.index)
        if result.outcome is DeleteOutcome.DELETED:
            console.print(f"[green]DELETE {index} -> ok[/green]", soft_wrap=True)
        elif result.outcome is DeleteOutcome.ALREADY_ABSENT:
            console.print(
                f"[yellow]DELETE {index} -> already absent[/yellow]", soft_wrap=True
            )
        else:
            error = escape(result.error or "")
            err_console.print(f"[red]DELETE {index} failed: {error}[/red]", soft_wrap=True)

    console.print(
        f"Deleted {report.deleted_count}, already absent {report.already_absent_count}, "
        f"failed {len(report.failed)} of {len(report.candidates)} indices."
    )


def _print_report(report: RunReport) -> None:
    if not report.candidates:
        console.print(
            f"Nothing to delete: {report.matched} of {report.listed} indices matched, "
            "none older than the threshold."
        )
    elif report.dry_run:
        _print_dry_run(report)
    else:
        _print_live(report)


@app.command()
def main(
    url: Optional[str] = typer.Option(
        None, "--url", help="Base URL of the cluster, e.g. http://localhost:9200 [required]"
    ),
    username: Optional[str] = typer.Option(None, "--username", help="Basic auth username"),
    password: Optional[str] = typer.Option(None, "--password", help="Basic auth password"),
    index_prefix: Optional[str] = typer.Option(
        None, "--index-prefix", help="Index name prefix [default: zis-audit-]"
    ),
    older_than: Optional[str] = typer.Option(
        None,
        "--older-than",
        help="Delete indices older than this many months: 25, 25m or '25 months' [default: 25]",
    ),
    date_pattern: Optional[DatePattern] = typer.Option(
        None,
        "--date-pattern",
        case_sensitive=False,
        help="Date layout after the prefix: month (YYYY-MM, YYYY.MM) or week (YYYY-W) "
        "[default: month]",
    ),
    no_dryrun: bool = typer.Option(
        False, "--no-dryrun", help="Actually delete indices (default is a dry run)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="HTTP request timeout in seconds [default: 30]"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Delete indices whose name-encoded month is older than a threshold."""
    try:
        settings = load_app_config()
        level = validate_log_level(log_level) if log_level else settings.log_level
        try:
            configure_logging(level=level, log_dir=settings.log_dir)
        except OSError as e:
            raise ConfigError(f"Cannot write logs to {settings.log_dir}: {e}") from e
        config = build_retention_config(
            settings,
            url=url,
            username=username,
            password=password,
            index_prefix=index_prefix,
            older_than=older_than,
            date_pattern=date_pattern,
            no_dryrun=no_dryrun,
            timeout_seconds=timeout,
        )
    except (ConfigError, ValueError) as e:
        log.debug(CONFIG_INVALID, error=str(e), error_type=type(e).__name__)
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_CONFIG_ERROR) from None

    try:
        with create_store(config) as store:
            report = run_retention(config, store)
    except IndexClientError as e:
        log.error(RETENTION_RUN_FAILED, error=str(e), error_type=type(e).__name__)
        err_console.print(f"[red]Listing indices failed: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_LISTING_FAILED) from None

    _print_report(report)
    raise typer.Exit(EXIT_OK if report.success else EXIT_DELETE_FAILED)


if __name__ == "__main__":
    app()
