"""Read-only summary of the hospital's current state.

The report is a pure function of the appointment book, the bills, the roster
and the room allocator. Nothing here mutates session state.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from hospital_admin.models.appointment import Appointment
from hospital_admin.models.billing import Bill
from hospital_admin.models.people import Doctor, Patient, Person
from hospital_admin.services.rooms import RoomAllocator

UNKNOWN_NAME = "Unknown"


@dataclass
class DoctorLoad:
    """Appointment count for one doctor."""

    doctor_id: str
    name: str
    specialty: str
    appointment_count: int


@dataclass
class PatientStatus:
    """One row of the patient status table."""

    patient_id: str
    name: str
    condition: str
    room_number: str
    status: str


@dataclass
class TopPayer:
    """Patient with the largest billed total.

    ``name`` is "Unknown" when the patient has since left the roster.
    """

    patient_id: str
    name: str
    total: Decimal


@dataclass
class HospitalReport:
    """Snapshot produced by build_report.

    Attributes:
        doctors: Per-doctor appointment counts in roster order
        patients: Per-patient status rows in roster order
        top_payer: Highest aggregate bill total, or None without bills
        total_appointments: Number of booked appointments
        total_bills: Number of bills in the ledger
        available_rooms: Rooms not currently held
    """

    doctors: List[DoctorLoad] = field(default_factory=list)
    patients: List[PatientStatus] = field(default_factory=list)
    top_payer: Optional[TopPayer] = None
    total_appointments: int = 0
    total_bills: int = 0
    available_rooms: List[str] = field(default_factory=list)


def build_report(
    appointments: Iterable[Appointment],
    bills: Iterable[Bill],
    people: Iterable[Person],
    rooms: RoomAllocator,
) -> HospitalReport:
    """Aggregate appointments, bills, roster and rooms into a report.

    Args:
        appointments: Booked appointments
        bills: All bills, paid or not
        people: Roster entries
        rooms: Room allocator to read availability from

    Returns:
        HospitalReport snapshot
    """
    appointments = list(appointments)
    bills = list(bills)
    people = list(people)

    counts: Dict[str, int] = {}
    for appointment in appointments:
        counts[appointment.doctor_id] = counts.get(appointment.doctor_id, 0) + 1

    doctors = [
        DoctorLoad(
            doctor_id=person.id,
            name=person.name,
            specialty=person.specialty,
            appointment_count=counts.get(person.id, 0),
        )
        for person in people
        if isinstance(person, Doctor)
    ]

    patients = [
        PatientStatus(
            patient_id=person.id,
            name=person.name,
            condition=person.condition,
            room_number=person.room_number,
            status=person.status,
        )
        for person in people
        if isinstance(person, Patient)
    ]

    return HospitalReport(
        doctors=doctors,
        patients=patients,
        top_payer=find_top_payer(bills, people),
        total_appointments=len(appointments),
        total_bills=len(bills),
        available_rooms=rooms.available_rooms(),
    )


def totals_by_patient(bills: Iterable[Bill]) -> Dict[str, Decimal]:
    """Sum bill totals per patient id, keyed in first-seen order."""
    totals: Dict[str, Decimal] = {}
    for bill in bills:
        totals[bill.patient_id] = totals.get(bill.patient_id, Decimal("0")) + bill.total
    return totals


def find_top_payer(bills: Iterable[Bill], people: Iterable[Person]) -> Optional[TopPayer]:
    """Patient with the highest aggregate bill total.

    Ties go to the patient whose first bill appears earliest.
    """
    totals = totals_by_patient(bills)
    if not totals:
        return None

    # max() keeps the first of equal keys
    patient_id, total = max(totals.items(), key=lambda item: item[1])
    names = {person.id: person.name for person in people}
    return TopPayer(
        patient_id=patient_id,
        name=names.get(patient_id, UNKNOWN_NAME),
        total=total,
    )
