"""Demo data for a fresh session.

Mirrors the ward the console starts with: two patients, two doctors, one
booking for tomorrow, one bill and one prescription. Every change goes
through the services so the room mapping and patient flags agree.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from hospital_admin.services.session import HospitalSession

logger = logging.getLogger(__name__)

DEMO_ROOM = "101"


def seed_demo_data(session: HospitalSession, now: Optional[datetime] = None) -> None:
    """Populate the session with the demo roster.

    Args:
        session: Session to seed
        now: Reference time for the demo appointment (defaults to now)

    Books through HospitalSession.book_now, so call it from synchronous code
    only, never from inside a running event loop.
    """
    now = now or datetime.now().replace(second=0, microsecond=0)

    rohit = session.add_patient("Rohit Sharma", "Fever")
    virat = session.add_patient("Virat Kohli", "Fractured Arm")

    dhoni = session.add_doctor("Dr. Ms Dhoni", "General Medicine")
    session.add_doctor("Dr. Gambhir", "Orthopedics")

    if not session.rooms.assign(virat, DEMO_ROOM):
        logger.warning(f"Demo room {DEMO_ROOM} is not configured; Virat Kohli stays unassigned")

    session.book_now(rohit.id, dhoni.id, now + timedelta(days=1))

    session.bill_patient(
        rohit.id,
        [
            ("Consultation Fee", Decimal("500")),
            ("Lab Test", Decimal("1200")),
        ],
        pay=False,
    )

    session.prescriptions.add(rohit, "Paracetamol 500mg")

    logger.info(f"Seeded demo data: {len(session.roster)} people on the roster")
