"""Roster-related CLI commands."""

import logging
import sys
from pathlib import Path

import click

from hospital_admin.models.people import PersonKind
from hospital_admin.roster_import import parse_roster_csv
from hospital_admin.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


@click.group()
def roster() -> None:
    """Roster file operations."""
    pass


@roster.command("validate")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
def validate_roster_command(file: Path) -> None:
    """Validate a roster CSV file.

    The file needs ``kind`` and ``name`` columns; ``condition`` and
    ``specialty`` are optional. Exits with code 1 when any row is invalid.

    Examples:

        # Check a roster before loading it into a session
        hospital-admin roster validate roster.csv
    """
    try:
        people = parse_roster_csv(file)
    except ValidationError as e:
        click.secho(f"Validation Error: {e}", fg="red", err=True)
        logger.error(f"Roster validation failed for {file}")
        sys.exit(1)

    patients = sum(1 for person in people if person.kind is PersonKind.PATIENT)
    doctors = len(people) - patients

    click.secho(f"Roster is valid: {len(people)} record(s)", fg="green")
    click.echo(f"  - Patients: {patients}")
    click.echo(f"  - Doctors: {doctors}")
