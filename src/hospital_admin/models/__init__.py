"""Models module.

This module provides the dataclasses for people, appointments and bills.
"""

from hospital_admin.models.appointment import Appointment
from hospital_admin.models.billing import Bill, Charge
from hospital_admin.models.people import Doctor, Patient, Person, PersonKind

__all__ = [
    "Appointment",
    "Bill",
    "Charge",
    "Doctor",
    "Patient",
    "Person",
    "PersonKind",
]
