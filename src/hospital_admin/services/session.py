"""Session context owning all in-memory state.

One HospitalSession is created per run and passed to every menu action and
to the report. Services never reach for global state.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Tuple

from hospital_admin.config.schema import Config
from hospital_admin.models.appointment import Appointment
from hospital_admin.models.billing import Bill, Charge
from hospital_admin.models.people import Doctor, Patient
from hospital_admin.services.billing import BillingLedger
from hospital_admin.services.prescriptions import PrescriptionTracker
from hospital_admin.services.reporting import HospitalReport, build_report
from hospital_admin.services.roster import Roster
from hospital_admin.services.rooms import RoomAllocator
from hospital_admin.services.scheduler import AppointmentScheduler

logger = logging.getLogger(__name__)

DEFAULT_ROOM_IDS = ("101", "102", "103", "201", "202")


@dataclass
class HospitalSession:
    """All services for one operator session.

    Attributes:
        roster: Patients and doctors
        scheduler: Appointment book
        rooms: Room allocator
        prescriptions: Prescription tracker
        ledger: Billing ledger
    """

    roster: Roster = field(default_factory=Roster)
    scheduler: AppointmentScheduler = field(default_factory=AppointmentScheduler)
    rooms: RoomAllocator = field(default_factory=lambda: RoomAllocator(DEFAULT_ROOM_IDS))
    prescriptions: PrescriptionTracker = field(default_factory=PrescriptionTracker)
    ledger: BillingLedger = field(default_factory=BillingLedger)

    @classmethod
    def from_config(cls, config: Config) -> "HospitalSession":
        """Build a session from the validated configuration."""
        session = cls(
            scheduler=AppointmentScheduler(
                latency_seconds=config.scheduling.simulated_latency_ms / 1000
            ),
            rooms=RoomAllocator(config.rooms.room_ids),
        )
        logger.info(
            f"Session created with {len(config.rooms.room_ids)} room(s) and "
            f"{config.scheduling.simulated_latency_ms} ms scheduling latency"
        )
        return session

    def add_patient(self, name: str, condition: str = "") -> Patient:
        patient = Patient(name=name, condition=condition)
        self.roster.add(patient)
        return patient

    def add_doctor(self, name: str, specialty: str = "") -> Doctor:
        doctor = Doctor(name=name, specialty=specialty)
        self.roster.add(doctor)
        return doctor

    def remove_patient(self, patient_id: str) -> bool:
        """Remove a patient from the roster.

        Their room is released so the allocator keeps no entry for a person
        who no longer exists. Appointments and bills are left as they are.
        """
        removed = self.roster.remove(patient_id)
        if removed:
            self.rooms.release(patient_id)
        return removed

    async def book(self, patient_id: str, doctor_id: str, when: datetime) -> Appointment:
        """Schedule an appointment for roster ids."""
        return await self.scheduler.schedule(
            Appointment(patient_id=patient_id, doctor_id=doctor_id, when=when)
        )

    def book_now(self, patient_id: str, doctor_id: str, when: datetime) -> Appointment:
        """Run book() to completion from synchronous code.

        Starts its own event loop, so it cannot be called while a loop is
        running in this thread. Async callers await book() instead.

        Raises:
            RuntimeError: If called from inside a running event loop
        """
        return asyncio.run(self.book(patient_id, doctor_id, when))

    def bill_patient(
        self,
        patient_id: str,
        charges: Iterable[Tuple[str, Decimal]],
        pay: bool = True,
    ) -> Bill:
        """Open a bill, add the given (description, amount) charges and pay it."""
        bill = self.ledger.open(patient_id)
        for description, amount in charges:
            self.ledger.add_charge(bill, Charge(description=description, amount=amount))
        if pay:
            self.ledger.pay(bill)
        return bill

    def report(self) -> HospitalReport:
        return build_report(
            self.scheduler.all(),
            self.ledger.all(),
            self.roster,
            self.rooms,
        )

