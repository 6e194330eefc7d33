"""CSV parser for roster files.

A roster CSV lists one person per row::

    kind,name,condition,specialty
    patient,Rohit Sharma,Fever,
    doctor,Dr. Gambhir,,Orthopedics

``condition`` applies to patients and ``specialty`` to doctors; both are
optional columns.
"""

import logging
from pathlib import Path
from typing import List

import pandas as pd

from hospital_admin.models.people import Doctor, Patient, Person, PersonKind
from hospital_admin.utils.exceptions import ValidationError


logger = logging.getLogger(__name__)

# Required CSV columns
REQUIRED_COLUMNS = ["kind", "name"]

# Optional CSV columns
OPTIONAL_COLUMNS = ["condition", "specialty"]

VALID_KINDS = [kind.value for kind in PersonKind]


def parse_roster_csv(file_path: Path) -> List[Person]:
    """Parse patients and doctors from a CSV file.

    All row problems are collected before failing so the operator can fix
    the file in one pass.

    Args:
        file_path: Path to the roster CSV

    Returns:
        People in file order, not yet added to any roster

    Raises:
        ValidationError: If required columns are missing or any row is invalid
        FileNotFoundError: If the CSV file does not exist
    """
    logger.info(f"Loading roster CSV from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
    except Exception as e:
        raise ValidationError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV with UTF-8 encoding. Error: {e}"
        ) from e

    df.columns = [str(column).strip().lower() for column in df.columns]

    missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_columns:
        raise ValidationError(
            f"Missing required columns: {', '.join(missing_columns)}. "
            f"Required columns are: {', '.join(REQUIRED_COLUMNS)}"
        )

    unknown_columns = [
        col for col in df.columns if col not in REQUIRED_COLUMNS + OPTIONAL_COLUMNS
    ]
    if unknown_columns:
        logger.warning(
            f"CSV contains unknown columns that will be ignored: {', '.join(unknown_columns)}"
        )

    for column in OPTIONAL_COLUMNS:
        if column not in df.columns:
            df[column] = ""

    df = df.apply(lambda column: column.str.strip())

    errors = _validate_rows(df)
    if errors:
        raise ValidationError(
            f"Found {len(errors)} validation error(s) in CSV:\n  - "
            + "\n  - ".join(errors)
        )

    people: List[Person] = []
    for row in df.itertuples(index=False):
        if row.kind.lower() == PersonKind.PATIENT.value:
            people.append(Patient(name=row.name, condition=row.condition))
        else:
            people.append(Doctor(name=row.name, specialty=row.specialty))

    logger.info(f"Successfully parsed {len(people)} roster record(s)")
    return people


def _validate_rows(df: pd.DataFrame) -> List[str]:
    """Validate kind and name on every row.

    Args:
        df: DataFrame with stripped string cells

    Returns:
        List of error messages (empty if no errors)
    """
    errors: List[str] = []

    for idx, row in df.iterrows():
        row_num = idx + 2  # +1 for header, +1 for 1-indexed

        if row["kind"].lower() not in VALID_KINDS:
            errors.append(
                f"Row {row_num}: Invalid kind '{row['kind']}'. "
                f"Must be one of: {', '.join(VALID_KINDS)}"
            )

        if not row["name"]:
            errors.append(f"Row {row_num}: Missing required field 'name'")

    return errors
