"""Walkthrough of a hospital session without the interactive menu.

Shows duplicate appointment detection, room allocation and payment
notification driven directly through HospitalSession.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from decimal import Decimal

from hospital_admin.models.appointment import Appointment
from hospital_admin.models.billing import Bill
from hospital_admin.services.session import HospitalSession
from hospital_admin.utils.exceptions import DuplicateAppointmentError, RoomOccupiedError
from hospital_admin.utils.formatting import format_currency

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


async def book_twice(session: HospitalSession, appointment: Appointment) -> None:
    await session.scheduler.schedule(appointment)
    try:
        await session.scheduler.schedule(
            Appointment(appointment.patient_id, appointment.doctor_id, appointment.when)
        )
    except DuplicateAppointmentError as e:
        print(f"Second booking rejected: {e}")


def main() -> None:
    session = HospitalSession()
    rohit = session.add_patient("Rohit Sharma", "Fever")
    virat = session.add_patient("Virat Kohli", "Fractured Arm")
    dhoni = session.add_doctor("Dr. Ms Dhoni", "General Medicine")

    print("=" * 60)
    print("Scheduling")
    print("=" * 60)
    when = datetime.now().replace(second=0, microsecond=0) + timedelta(days=1)
    asyncio.run(book_twice(session, Appointment(rohit.id, dhoni.id, when)))
    print(f"Appointments on the book: {len(session.scheduler)}")

    print("=" * 60)
    print("Rooms")
    print("=" * 60)
    session.rooms.assign(rohit, "101")
    try:
        session.rooms.assign(virat, "101", strict=True)
    except RoomOccupiedError as e:
        print(f"Assignment rejected: {e}")
    print(f"Available rooms: {', '.join(session.rooms.available_rooms())}")

    print("=" * 60)
    print("Billing")
    print("=" * 60)

    def announce(bill: Bill) -> None:
        print(f"Paid {format_currency(bill.total)} by {session.roster.name_of(bill.patient_id)}")

    session.ledger.subscribe(announce)
    session.bill_patient(
        rohit.id,
        [("Consultation Fee", Decimal("500")), ("Lab Test", Decimal("1200"))],
    )

    report = session.report()
    print(f"Top payer: {report.top_payer.name}")


if __name__ == "__main__":
    main()
