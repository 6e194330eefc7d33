"""Unit tests for room allocation."""

import pytest

from hospital_admin.models.people import Patient
from hospital_admin.services.rooms import RoomAllocator
from hospital_admin.utils.exceptions import (
    InvalidRoomError,
    NotAdmittedError,
    RoomOccupiedError,
)


class TestAssign:
    """Test room assignment."""

    def test_assign_sets_patient_state(self, rooms: RoomAllocator, patient: Patient) -> None:
        # Act
        assigned = rooms.assign(patient, "101")

        # Assert
        assert assigned is True
        assert patient.is_admitted is True
        assert patient.room_number == "101"
        assert rooms.room_of(patient.id) == "101"
        assert rooms.occupant_of("101") == patient.id

    def test_second_patient_cannot_take_occupied_room(
        self, rooms: RoomAllocator, patient: Patient, other_patient: Patient
    ) -> None:
        # Arrange
        assert rooms.assign(patient, "101") is True

        # Act
        assigned = rooms.assign(other_patient, "101")

        # Assert
        assert assigned is False
        assert other_patient.is_admitted is False
        assert other_patient.room_number == ""
        assert "101" not in rooms.available_rooms()

    def test_unknown_room_fails(self, rooms: RoomAllocator, patient: Patient) -> None:
        assert rooms.assign(patient, "999") is False
        assert patient.is_admitted is False

    def test_strict_unknown_room_raises(self, rooms: RoomAllocator, patient: Patient) -> None:
        with pytest.raises(InvalidRoomError) as exc_info:
            rooms.assign(patient, "999", strict=True)

        assert "999" in str(exc_info.value)

    def test_strict_occupied_room_raises(
        self, rooms: RoomAllocator, patient: Patient, other_patient: Patient
    ) -> None:
        rooms.assign(patient, "101")

        with pytest.raises(RoomOccupiedError):
            rooms.assign(other_patient, "101", strict=True)

    def test_reassign_moves_patient_and_frees_old_room(
        self, rooms: RoomAllocator, patient: Patient
    ) -> None:
        """Test a second assign for the same patient overwrites the mapping."""
        # Arrange
        rooms.assign(patient, "101")

        # Act
        assert rooms.assign(patient, "102") is True

        # Assert
        assert patient.room_number == "102"
        assert rooms.room_of(patient.id) == "102"
        assert rooms.occupant_of("101") is None
        assert "101" in rooms.available_rooms()
        assert "102" not in rooms.available_rooms()

    def test_reassign_same_room_is_allowed(self, rooms: RoomAllocator, patient: Patient) -> None:
        rooms.assign(patient, "101")

        assert rooms.assign(patient, "101") is True

    def test_each_room_has_at_most_one_patient(self, rooms: RoomAllocator) -> None:
        """Test the mapping stays injective across many attempts."""
        patients = [Patient(name=f"Patient {i}") for i in range(8)]

        for index, p in enumerate(patients):
            rooms.assign(p, rooms.room_ids[index % len(rooms.room_ids)])

        held = [rooms.room_of(p.id) for p in patients if rooms.room_of(p.id) is not None]
        assert len(held) == len(set(held))
        assert len(held) == 5


class TestDischarge:
    """Test discharge and availability."""

    def test_discharge_clears_state(self, rooms: RoomAllocator, patient: Patient) -> None:
        # Arrange
        rooms.assign(patient, "101")

        # Act
        discharged = rooms.discharge(patient)

        # Assert
        assert discharged is True
        assert patient.is_admitted is False
        assert patient.room_number == ""
        assert rooms.room_of(patient.id) is None
        assert "101" in rooms.available_rooms()

    def test_discharge_not_admitted_fails(self, rooms: RoomAllocator, patient: Patient) -> None:
        assert rooms.discharge(patient) is False

    def test_strict_discharge_not_admitted_raises(self, rooms: RoomAllocator, patient: Patient) -> None:
        with pytest.raises(NotAdmittedError):
            rooms.discharge(patient, strict=True)

    def test_room_reusable_after_discharge(
        self, rooms: RoomAllocator, patient: Patient, other_patient: Patient
    ) -> None:
        # Arrange
        rooms.assign(patient, "101")
        rooms.discharge(patient)

        # Act
        assigned = rooms.assign(other_patient, "101")

        # Assert
        assert assigned is True
        assert other_patient.room_number == "101"

    def test_available_rooms_order_is_inventory_order(self, rooms: RoomAllocator, patient: Patient) -> None:
        rooms.assign(patient, "103")

        assert rooms.available_rooms() == ["101", "102", "201", "202"]

    def test_release_drops_mapping(self, rooms: RoomAllocator, patient: Patient) -> None:
        rooms.assign(patient, "201")

        assert rooms.release(patient.id) == "201"
        assert rooms.release(patient.id) is None
        assert "201" in rooms.available_rooms()
