"""Roster of people known to the hospital.

The roster keeps patients and doctors in one ordered list. It only stores and
looks things up; admission state, prescriptions and bookings are owned by the
other services.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from hospital_admin.logging_audit import log_audit_event
from hospital_admin.models.people import Doctor, Patient, Person, PersonKind
from hospital_admin.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class KindView:
    """Restartable, lazily filtered view of the roster for one kind.

    Each iteration re-scans the roster, so people added after the view was
    created are included.
    """

    def __init__(self, people: List[Person], kind: PersonKind) -> None:
        self._people = people
        self._kind = kind

    def __iter__(self) -> Iterator[Person]:
        return (person for person in self._people if person.kind is self._kind)


class Roster:
    """Ordered collection of patients and doctors.

    Example:
        >>> roster = Roster()
        >>> patient = roster.add(Patient(name="Rohit Sharma", condition="Fever"))
        >>> roster.find_by_id(patient.id) is patient
        True
    """

    def __init__(self) -> None:
        self._people: List[Person] = []

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._people))

    def add(self, person: Person) -> Person:
        """Append a person to the roster and return it."""
        self._people.append(person)
        event = "PATIENT_ADDED" if person.kind is PersonKind.PATIENT else "DOCTOR_ADDED"
        log_audit_event(
            event, {"status": "success", "person_id": person.id, "name": person.name}
        )
        logger.debug(f"Roster size is now {len(self._people)}")
        return person

    def add_all(self, people: Iterable[Person]) -> None:
        for person in people:
            self.add(person)

    def remove(self, person_id: str) -> bool:
        """Remove the first person with the given id.

        Returns:
            True if a person was removed, False if the id is unknown
        """
        for index, person in enumerate(self._people):
            if person.id == person_id:
                del self._people[index]
                event = (
                    "PATIENT_REMOVED" if person.kind is PersonKind.PATIENT else "DOCTOR_REMOVED"
                )
                log_audit_event(event, {"status": "success", "person_id": person_id})
                return True

        logger.warning(f"Cannot remove {person_id}: not on the roster")
        return False

    def list_by_kind(self, kind: PersonKind) -> KindView:
        """Return a restartable view over the people of one kind."""
        return KindView(self._people, kind)

    def patients(self) -> List[Patient]:
        """Snapshot of all patients in roster order."""
        return [person for person in self._people if isinstance(person, Patient)]

    def doctors(self) -> List[Doctor]:
        """Snapshot of all doctors in roster order."""
        return [person for person in self._people if isinstance(person, Doctor)]

    def find_by_id(self, person_id: str) -> Optional[Person]:
        for person in self._people:
            if person.id == person_id:
                return person
        return None

    def get_patient(self, person_id: str) -> Patient:
        """Look up a patient by id.

        Raises:
            NotFoundError: If the id is unknown or belongs to a doctor
        """
        person = self.find_by_id(person_id)
        if not isinstance(person, Patient):
            raise NotFoundError(f"No patient with id {person_id}")
        return person

    def get_doctor(self, person_id: str) -> Doctor:
        """Look up a doctor by id.

        Raises:
            NotFoundError: If the id is unknown or belongs to a patient
        """
        person = self.find_by_id(person_id)
        if not isinstance(person, Doctor):
            raise NotFoundError(f"No doctor with id {person_id}")
        return person

    def name_of(self, person_id: str, default: str = "Unknown") -> str:
        """Display name for an id, or ``default`` for orphaned references."""
        person = self.find_by_id(person_id)
        return person.name if person is not None else default
