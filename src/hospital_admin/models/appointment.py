"""Appointment data model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from hospital_admin.utils.id_generator import APPOINTMENT_PREFIX, generate_id


@dataclass(frozen=True)
class Appointment:
    """A booked appointment between a patient and a doctor.

    Patient and doctor are referenced by id only; deleting either from the
    roster leaves the appointment in place.

    Attributes:
        patient_id: Roster id of the patient
        doctor_id: Roster id of the doctor
        when: Scheduled date and time
        id: Generated appointment identifier
    """

    patient_id: str
    doctor_id: str
    when: datetime
    id: str = field(
        init=False, compare=False, default_factory=lambda: generate_id(APPOINTMENT_PREFIX)
    )

    @property
    def slot_key(self) -> Tuple[str, str, datetime]:
        """The (patient, doctor, time) triple that must be unique."""
        return (self.patient_id, self.doctor_id, self.when)
