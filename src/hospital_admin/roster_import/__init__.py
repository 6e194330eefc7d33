"""Roster import from CSV files."""

from hospital_admin.roster_import.parser import parse_roster_csv

__all__ = ["parse_roster_csv"]
