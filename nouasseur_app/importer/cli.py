"""
Flask CLI commands for the bulk importers.

    flask importer events path/to/events.xlsx
    flask importer members memdata.xlsx --dry-run
"""

from __future__ import annotations

from pathlib import Path

import click
from flask import current_app
from flask.cli import AppGroup

from nouasseur_app.importer.adapters import ImportFileError
from nouasseur_app.importer.pipeline import ImportLoadError
from nouasseur_app.importer.service import import_collection

importer_cli = AppGroup("importer", help="Replace a collection with the rows of a spreadsheet export.")

_file_argument = click.argument(
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Read and transform the file without writing to the database.",
)


def _run_import(collection: str, file_path: Path, dry_run: bool) -> None:
    batch_size = int(current_app.config.get("IMPORTER_BATCH_SIZE", 100))
    click.echo(f"Importing {collection} from {file_path}{' (dry run)' if dry_run else ''}...")
    try:
        summary = import_collection(collection, file_path, dry_run=dry_run, batch_size=batch_size)
    except (ImportFileError, ImportLoadError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Rows read: {summary.rows_read}")
    click.echo(f"Rows skipped: {summary.rows_skipped}")
    click.echo(f"Blank rows ignored: {summary.rows_blank}")
    if summary.dry_run:
        click.echo("Dry run complete; no changes were written.")
    else:
        click.echo(f"Rows removed: {summary.rows_deleted}")
        click.echo(f"Rows inserted: {summary.rows_inserted}")


@importer_cli.command("events")
@_file_argument
@_dry_run_option
def import_events_command(file_path: Path, dry_run: bool) -> None:
    """Replace all events from an events workbook."""
    _run_import("events", file_path, dry_run)


@importer_cli.command("members")
@_file_argument
@_dry_run_option
def import_members_command(file_path: Path, dry_run: bool) -> None:
    """Replace all members from the member workbook."""
    _run_import("members", file_path, dry_run)


@importer_cli.command("directories")
@_file_argument
@_dry_run_option
def import_directories_command(file_path: Path, dry_run: bool) -> None:
    """Rebuild the directory from the member workbook."""
    _run_import("directories", file_path, dry_run)
