"""Main CLI entry point for the hospital administration console.

This module provides the main Click command group for the hospital-admin CLI.
"""

from pathlib import Path
from typing import Optional

import click

from hospital_admin import __version__
from hospital_admin.cli import render
from hospital_admin.cli.auth import Credentials
from hospital_admin.cli.menu import HospitalMenu
from hospital_admin.cli.report_view import print_report
from hospital_admin.cli.roster_commands import roster
from hospital_admin.config import Config, load_config
from hospital_admin.logging_audit import configure_logging, quiet_console, restore_console
from hospital_admin.roster_import import parse_roster_csv
from hospital_admin.seed import seed_demo_data
from hospital_admin.services.session import HospitalSession
from hospital_admin.utils.exceptions import ConfigurationError, ValidationError


@click.group()
@click.version_option(version=__version__, prog_name="hospital-admin")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact patient names from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Hospital administration console.

    Manage patients, doctors, appointments, room assignments,
    prescriptions and billing for a single operator session.

    Common usage:

        # Start the interactive menu (login: admin / 1234 by default)
        hospital-admin run

        # Print the report for the demo ward
        hospital-admin report

        # Load extra people from a CSV roster
        hospital-admin run --roster roster.csv
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = verbose

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii

    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )


def build_session(config: Config, roster_file: Optional[Path], seed: bool) -> HospitalSession:
    """Create a session, optionally seeded with demo data and a CSV roster."""
    session = HospitalSession.from_config(config)
    if seed:
        seed_demo_data(session)
    if roster_file is not None:
        session.roster.add_all(parse_roster_csv(roster_file))
    return session


roster_option = click.option(
    "--roster",
    "roster_file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="CSV roster of patients and doctors to load at startup",
)
seed_option = click.option(
    "--seed/--no-seed",
    default=None,
    help="Seed the demo ward (default from config)",
)


@cli.command()
@roster_option
@seed_option
@click.pass_context
def run(ctx: click.Context, roster_file: Optional[Path], seed: Optional[bool]) -> None:
    """Start the interactive menu session."""
    config_obj: Config = ctx.obj["config"]
    if seed is None:
        seed = config_obj.demo.seed_demo_data

    try:
        session = build_session(config_obj, roster_file, seed)
    except ValidationError as e:
        render.error(f"Roster could not be loaded: {e}")
        raise click.exceptions.Exit(1)

    menu = HospitalMenu(
        session,
        Credentials.from_config(config_obj.auth),
        currency_symbol=config_obj.billing.currency_symbol,
    )

    # Log lines would interleave with the menu; the file handler keeps them
    saved_level = None if ctx.obj["verbose"] else quiet_console()
    try:
        menu.run()
    finally:
        restore_console(saved_level)


@cli.command()
@roster_option
@seed_option
@click.pass_context
def report(ctx: click.Context, roster_file: Optional[Path], seed: Optional[bool]) -> None:
    """Print the hospital report without starting the menu."""
    config_obj: Config = ctx.obj["config"]
    if seed is None:
        seed = config_obj.demo.seed_demo_data

    try:
        session = build_session(config_obj, roster_file, seed)
    except ValidationError as e:
        render.error(f"Roster could not be loaded: {e}")
        raise click.exceptions.Exit(1)

    print_report(session.report(), config_obj.billing.currency_symbol)


cli.add_command(roster)


@cli.group("config")
def config_group() -> None:
    """Configuration management commands."""
    pass


@config_group.command("validate")
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate_config(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        hospital-admin config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    click.echo("\nRooms:")
    click.echo(f"  Inventory:   {', '.join(config_obj.rooms.room_ids)}")
    click.echo("\nScheduling:")
    click.echo(f"  Latency:     {config_obj.scheduling.simulated_latency_ms} ms")
    click.echo("\nBilling:")
    click.echo(f"  Currency:    {config_obj.billing.currency_symbol}")
    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")
    click.echo("\nDemo:")
    click.echo(f"  Seed data:   {config_obj.demo.seed_demo_data}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"hospital-admin version {__version__}")


if __name__ == "__main__":
    cli()
