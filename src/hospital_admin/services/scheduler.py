"""Appointment scheduling with duplicate detection.

Booking goes through a simulated backing-store round trip, so ``schedule``
is a coroutine. The latency always completes; there is no timeout or
cancellation handling.
"""

import asyncio
import logging
from typing import List

from hospital_admin.logging_audit import log_audit_event
from hospital_admin.models.appointment import Appointment
from hospital_admin.utils.exceptions import DuplicateAppointmentError

logger = logging.getLogger(__name__)

DEFAULT_LATENCY_SECONDS = 0.1


class AppointmentScheduler:
    """Keeps the appointment book in insertion order.

    Two appointments conflict only when patient, doctor and timestamp are all
    equal. Overlapping but different timestamps are allowed.

    Args:
        latency_seconds: Simulated store latency awaited by each schedule call

    Example:
        >>> scheduler = AppointmentScheduler(latency_seconds=0)
        >>> appointment = Appointment(patient.id, doctor.id, when)
        >>> asyncio.run(scheduler.schedule(appointment))
        >>> scheduler.all() == [appointment]
        True
    """

    def __init__(self, latency_seconds: float = DEFAULT_LATENCY_SECONDS) -> None:
        self.latency_seconds = latency_seconds
        self._appointments: List[Appointment] = []

    def __len__(self) -> int:
        return len(self._appointments)

    async def schedule(self, appointment: Appointment) -> Appointment:
        """Book an appointment.

        Args:
            appointment: Appointment to add

        Returns:
            The booked appointment

        Raises:
            DuplicateAppointmentError: If an appointment with the same
                patient, doctor and time already exists. The book is unchanged.
        """
        await asyncio.sleep(self.latency_seconds)

        # No await between the check and the append
        if self.has_conflict(appointment):
            log_audit_event(
                "APPOINTMENT_SCHEDULED",
                {
                    "status": "failure",
                    "patient_id": appointment.patient_id,
                    "doctor_id": appointment.doctor_id,
                    "error_message": "duplicate appointment",
                },
            )
            raise DuplicateAppointmentError(
                f"Duplicate appointment found for {appointment.when:%Y-%m-%d %H:%M}."
            )

        self._appointments.append(appointment)

        log_audit_event(
            "APPOINTMENT_SCHEDULED",
            {
                "status": "success",
                "appointment_id": appointment.id,
                "patient_id": appointment.patient_id,
                "doctor_id": appointment.doctor_id,
                "when": appointment.when.isoformat(),
            },
        )
        return appointment

    def has_conflict(self, appointment: Appointment) -> bool:
        """Check whether the appointment's slot is already booked."""
        key = appointment.slot_key
        return any(existing.slot_key == key for existing in self._appointments)

    def delete(self, appointment_id: str) -> bool:
        """Delete an appointment by id.

        Returns:
            True if it existed and was removed, False otherwise
        """
        for index, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                del self._appointments[index]
                log_audit_event(
                    "APPOINTMENT_DELETED",
                    {"status": "success", "appointment_id": appointment_id},
                )
                return True

        logger.warning(f"Cannot delete appointment {appointment_id}: not found")
        return False

    def all(self) -> List[Appointment]:
        """All appointments in insertion order."""
        return list(self._appointments)

    def for_doctor(self, doctor_id: str) -> List[Appointment]:
        return [a for a in self._appointments if a.doctor_id == doctor_id]

    def for_patient(self, patient_id: str) -> List[Appointment]:
        return [a for a in self._appointments if a.patient_id == patient_id]
