"""Identifier generation for roster entities, appointments and bills.

Identifiers are UUID4 strings with a short prefix naming the entity type,
e.g. ``PAT-1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed``.
"""

import logging
import uuid
from typing import Set


logger = logging.getLogger(__name__)

PATIENT_PREFIX = "PAT"
DOCTOR_PREFIX = "DOC"
APPOINTMENT_PREFIX = "APT"
BILL_PREFIX = "BILL"

# Track generated IDs within the process to guarantee uniqueness
_generated_ids: Set[str] = set()

# Maximum attempts to generate a unique ID (collision should be extremely rare)
MAX_GENERATION_ATTEMPTS = 1000


def generate_id(prefix: str) -> str:
    """Generate a unique identifier in ``{prefix}-{UUID}`` format.

    Args:
        prefix: Entity prefix such as PATIENT_PREFIX or BILL_PREFIX

    Returns:
        Identifier string unique within this process

    Raises:
        ValueError: If unable to generate unique ID after maximum attempts
    """
    for attempt in range(MAX_GENERATION_ATTEMPTS):
        new_id = f"{prefix}-{uuid.uuid4()}"

        if new_id not in _generated_ids:
            _generated_ids.add(new_id)
            return new_id

        logger.warning(
            f"ID collision detected for {new_id}. Regenerating (attempt {attempt + 1})"
        )

    raise ValueError(
        f"Unable to generate unique {prefix} ID after {MAX_GENERATION_ATTEMPTS} attempts. "
        "This is extremely rare and may indicate a system issue."
    )


def reset_generated_ids() -> None:
    """Reset the set of generated IDs.

    Primarily for tests that want a clean slate.
    """
    _generated_ids.clear()
    logger.debug("Reset generated IDs tracking set")
