"""Prescription tracking on patient records."""

import logging
from typing import List

from hospital_admin.logging_audit import log_audit_event
from hospital_admin.models.people import Patient

logger = logging.getLogger(__name__)


class PrescriptionTracker:
    """Appends medications to a patient's prescription list.

    Any string is accepted and duplicates are kept; input checks belong to
    the caller.
    """

    def add(self, patient: Patient, medication: str) -> None:
        patient.prescriptions.append(medication)
        log_audit_event(
            "PRESCRIPTION_ADDED",
            {"status": "success", "patient_id": patient.id, "medication": medication},
        )

    def list(self, patient: Patient) -> List[str]:
        """Prescriptions in the order they were added."""
        return list(patient.prescriptions)
