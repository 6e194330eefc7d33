"""People on the hospital roster.

A roster entry is either a Patient or a Doctor. The two variants share an
immutable ``id`` and a mutable ``name`` and are told apart by ``kind``; code
that needs variant-specific fields checks ``kind`` (or the class) first.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Union

from hospital_admin.utils.id_generator import (
    DOCTOR_PREFIX,
    PATIENT_PREFIX,
    generate_id,
)


class PersonKind(Enum):
    """Roster variant tag."""

    PATIENT = "patient"
    DOCTOR = "doctor"


@dataclass(eq=False)
class Patient:
    """A patient on the roster.

    Attributes:
        name: Display name
        condition: Presenting condition (free text)
        room_number: Room currently held, empty string when unassigned
        is_admitted: True while the patient holds a room
        prescriptions: Medications in the order they were prescribed

    ``room_number`` and ``is_admitted`` are maintained by the RoomAllocator;
    ``prescriptions`` is append-only and maintained by the PrescriptionTracker.
    """

    kind: ClassVar[PersonKind] = PersonKind.PATIENT

    name: str
    condition: str = ""
    room_number: str = ""
    is_admitted: bool = False
    prescriptions: List[str] = field(default_factory=list)
    _id: str = field(
        init=False, repr=False, default_factory=lambda: generate_id(PATIENT_PREFIX)
    )

    @property
    def id(self) -> str:
        return self._id

    @property
    def status(self) -> str:
        """Admission status label used in reports."""
        return "Admitted" if self.is_admitted else "Discharged"


@dataclass(eq=False)
class Doctor:
    """A doctor on the roster.

    Attributes:
        name: Display name
        specialty: Medical specialty
    """

    kind: ClassVar[PersonKind] = PersonKind.DOCTOR

    name: str
    specialty: str = ""
    _id: str = field(
        init=False, repr=False, default_factory=lambda: generate_id(DOCTOR_PREFIX)
    )

    @property
    def id(self) -> str:
        return self._id


Person = Union[Patient, Doctor]
