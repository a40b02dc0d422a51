"""Command-line interface for the fleet status reports."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import click

from fleet_status.fleet.overview import summarize_fleet
from fleet_status.reports.full_report import build_full_report
from fleet_status.reports.summary_report import build_summary_report
from fleet_status.storage.snapshot_reader import load_snapshot
from fleet_status.storage.snapshot_writer import SnapshotWriter
from fleet_status.validation.snapshot_checks import validate_snapshot

logger = logging.getLogger(__name__)

NOW_FORMATS = ["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"]

snapshot_argument = click.argument(
    "snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def report_options(func):
    func = click.option(
        "--archive", default=None, type=click.Path(file_okay=False, path_type=Path),
        help="Also save the snapshot as Parquet in this directory.",
    )(func)
    func = click.option(
        "--output", "-o", default=None, type=click.Path(dir_okay=False, path_type=Path),
        help="Write the report to this file instead of stdout.",
    )(func)
    func = click.option(
        "--now", default=None, type=click.DateTime(formats=NOW_FORMATS),
        help="Report timestamp (default: current local time).",
    )(func)
    return func


def _emit_report(build, snapshot, now, output, archive) -> None:
    records = load_snapshot(snapshot)
    now = now or datetime.now()
    text = build(records, now)

    if archive is not None:
        path = SnapshotWriter(archive).write(records, f"snapshot_{now:%Y%m%d_%H%M}.parquet")
        logger.info(f"Snapshot archived to {path}")

    if output is None:
        click.echo(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Report written to {output}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def main(verbose):
    """Fleet status reports from a truck snapshot."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@snapshot_argument
@report_options
def full(snapshot, now, output, archive):
    """Render the full operational report."""
    _emit_report(build_full_report, snapshot, now, output, archive)


@main.command()
@snapshot_argument
@report_options
def summary(snapshot, now, output, archive):
    """Render the condensed summary report."""
    _emit_report(build_summary_report, snapshot, now, output, archive)


@main.command()
@snapshot_argument
def overview(snapshot):
    """Print dashboard counters as JSON."""
    records = load_snapshot(snapshot)
    click.echo(json.dumps(summarize_fleet(records).to_dict(), indent=2))


@main.command()
@snapshot_argument
def check(snapshot):
    """Validate a snapshot; exits with status 1 on errors."""
    records = load_snapshot(snapshot)
    report = validate_snapshot(records)
    click.echo(report.summary())
    if not report.passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
