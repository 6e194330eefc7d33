"""Services module.

In-memory domain services and the session that owns them.
"""

from hospital_admin.services.billing import BillingLedger
from hospital_admin.services.prescriptions import PrescriptionTracker
from hospital_admin.services.reporting import HospitalReport, build_report
from hospital_admin.services.rooms import RoomAllocator
from hospital_admin.services.roster import Roster
from hospital_admin.services.scheduler import AppointmentScheduler
from hospital_admin.services.session import HospitalSession

__all__ = [
    "AppointmentScheduler",
    "BillingLedger",
    "HospitalReport",
    "HospitalSession",
    "PrescriptionTracker",
    "RoomAllocator",
    "Roster",
    "build_report",
]
