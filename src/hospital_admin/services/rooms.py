"""Ward room allocation.

The allocator owns a fixed inventory of room ids and a mapping from patient
id to room id. A room holds at most one patient and a patient holds at most
one room. ``Patient.is_admitted`` and ``Patient.room_number`` mirror the
mapping and are only changed here.
"""

import logging
from typing import Dict, Iterable, List, Optional

from hospital_admin.logging_audit import log_audit_event
from hospital_admin.models.people import Patient
from hospital_admin.utils.exceptions import (
    InvalidRoomError,
    NotAdmittedError,
    RoomAssignmentError,
    RoomOccupiedError,
)

logger = logging.getLogger(__name__)


class RoomAllocator:
    """Capacity-constrained room assignment.

    Args:
        room_ids: The assignable rooms; their order is the order used by
            available_rooms()

    Example:
        >>> rooms = RoomAllocator(["101", "102"])
        >>> rooms.assign(patient_a, "101")
        True
        >>> rooms.assign(patient_b, "101")
        False
        >>> rooms.available_rooms()
        ['102']
    """

    def __init__(self, room_ids: Iterable[str]) -> None:
        self._room_ids: List[str] = list(dict.fromkeys(room_ids))
        self._patient_rooms: Dict[str, str] = {}

    @property
    def room_ids(self) -> List[str]:
        return list(self._room_ids)

    def assign(self, patient: Patient, room_id: str, strict: bool = False) -> bool:
        """Assign a patient to a room.

        A patient who already holds a room is moved: their single mapping
        entry is overwritten and the previous room becomes free.

        Args:
            patient: Patient to admit
            room_id: Room to assign
            strict: Raise instead of returning False on failure

        Returns:
            True on success, False if the room is unknown or occupied

        Raises:
            InvalidRoomError: If strict and the room is not in the inventory
            RoomOccupiedError: If strict and another patient holds the room
        """
        try:
            self._check_assignable(patient, room_id)
        except RoomAssignmentError as e:
            log_audit_event(
                "ROOM_ASSIGNED",
                {
                    "status": "failure",
                    "patient_id": patient.id,
                    "room": room_id,
                    "error_message": str(e),
                },
            )
            if strict:
                raise
            return False

        previous = self._patient_rooms.get(patient.id)
        if previous is not None and previous != room_id:
            logger.warning(
                f"Patient {patient.id} moved from room {previous} to {room_id}; "
                f"room {previous} is released"
            )

        self._patient_rooms[patient.id] = room_id
        patient.room_number = room_id
        patient.is_admitted = True
        log_audit_event(
            "ROOM_ASSIGNED",
            {"status": "success", "patient_id": patient.id, "room": room_id},
        )
        return True

    def discharge(self, patient: Patient, strict: bool = False) -> bool:
        """Release the patient's room and mark them discharged.

        Returns:
            True on success, False if the patient holds no room

        Raises:
            NotAdmittedError: If strict and the patient holds no room
        """
        room_id = self._patient_rooms.pop(patient.id, None)
        if room_id is None:
            message = f"Patient {patient.id} is not admitted to any room"
            log_audit_event(
                "PATIENT_DISCHARGED",
                {"status": "failure", "patient_id": patient.id, "error_message": message},
            )
            if strict:
                raise NotAdmittedError(message)
            return False

        patient.room_number = ""
        patient.is_admitted = False
        log_audit_event(
            "PATIENT_DISCHARGED",
            {"status": "success", "patient_id": patient.id, "room": room_id},
        )
        return True

    def release(self, patient_id: str) -> Optional[str]:
        """Drop the mapping for a patient removed from the roster.

        Returns:
            The room that was freed, if any
        """
        room_id = self._patient_rooms.pop(patient_id, None)
        if room_id is not None:
            logger.info(f"Released room {room_id} held by removed patient {patient_id}")
        return room_id

    def available_rooms(self) -> List[str]:
        occupied = set(self._patient_rooms.values())
        return [room for room in self._room_ids if room not in occupied]

    def occupant_of(self, room_id: str) -> Optional[str]:
        """Patient id holding the room, or None."""
        for patient_id, held in self._patient_rooms.items():
            if held == room_id:
                return patient_id
        return None

    def room_of(self, patient_id: str) -> Optional[str]:
        return self._patient_rooms.get(patient_id)

    def _check_assignable(self, patient: Patient, room_id: str) -> None:
        if room_id not in self._room_ids:
            raise InvalidRoomError(
                f"Room {room_id} does not exist. Valid rooms: {', '.join(self._room_ids)}"
            )
        occupant = self.occupant_of(room_id)
        if occupant is not None and occupant != patient.id:
            raise RoomOccupiedError(f"Room {room_id} is already occupied")
