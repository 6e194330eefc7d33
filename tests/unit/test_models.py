"""Unit tests for people, appointment and billing models."""

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal
from itertools import permutations

import pytest

from hospital_admin.models import Appointment, Bill, Charge, Doctor, Patient, PersonKind


class TestPeople:
    """Test the Patient/Doctor variants."""

    def test_patient_defaults(self) -> None:
        """Test a new patient is unassigned with no prescriptions."""
        # Arrange & Act
        patient = Patient(name="Rohit Sharma", condition="Fever")

        # Assert
        assert patient.kind is PersonKind.PATIENT
        assert patient.room_number == ""
        assert patient.is_admitted is False
        assert patient.prescriptions == []
        assert patient.status == "Discharged"

    def test_doctor_kind(self) -> None:
        """Test doctors carry the DOCTOR tag and specialty."""
        doctor = Doctor(name="Dr. Gambhir", specialty="Orthopedics")

        assert doctor.kind is PersonKind.DOCTOR
        assert doctor.specialty == "Orthopedics"

    def test_ids_are_unique_and_prefixed(self) -> None:
        """Test every person gets a distinct generated id."""
        # Arrange & Act
        patients = [Patient(name="Same Name") for _ in range(50)]
        doctor = Doctor(name="Same Name")

        # Assert
        ids = {p.id for p in patients}
        assert len(ids) == 50
        assert all(i.startswith("PAT-") for i in ids)
        assert doctor.id.startswith("DOC-")

    def test_id_is_read_only(self) -> None:
        """Test the id cannot be reassigned."""
        patient = Patient(name="Rohit Sharma")

        with pytest.raises(AttributeError):
            patient.id = "PAT-other"  # type: ignore[misc]

    def test_name_is_mutable(self) -> None:
        """Test renaming keeps the identity."""
        patient = Patient(name="Rohit")
        original_id = patient.id

        patient.name = "Rohit Sharma"

        assert patient.name == "Rohit Sharma"
        assert patient.id == original_id

    def test_people_compare_by_identity(self) -> None:
        """Test two people with the same fields are still different entities."""
        assert Patient(name="Twin") != Patient(name="Twin")


class TestAppointment:
    """Test the Appointment model."""

    def test_slot_key(self) -> None:
        """Test the uniqueness triple is exposed as slot_key."""
        when = datetime(2030, 1, 15, 10, 30)
        appointment = Appointment(patient_id="PAT-1", doctor_id="DOC-1", when=when)

        assert appointment.slot_key == ("PAT-1", "DOC-1", when)
        assert appointment.id.startswith("APT-")

    def test_appointment_is_immutable(self) -> None:
        """Test appointments cannot be edited in place."""
        appointment = Appointment("PAT-1", "DOC-1", datetime(2030, 1, 15, 10, 30))

        with pytest.raises(FrozenInstanceError):
            appointment.when = datetime(2030, 1, 16)  # type: ignore[misc]


class TestBill:
    """Test Bill totals and charge accumulation."""

    def test_total_of_demo_charges(self) -> None:
        """Test charges 500 and 1200 total 1700."""
        # Arrange
        bill = Bill(patient_id="PAT-1")

        # Act
        bill.add_charge(Charge("Consultation Fee", Decimal("500")))
        bill.add_charge(Charge("Lab Test", Decimal("1200")))

        # Assert
        assert bill.total == Decimal("1700")

    def test_total_independent_of_order(self) -> None:
        """Test the total is the same for every ordering of charges."""
        amounts = [Decimal("500"), Decimal("1200"), Decimal("99.50")]

        for ordering in permutations(amounts):
            bill = Bill(patient_id="PAT-1")
            for amount in ordering:
                bill.add_charge(Charge("item", amount))
            assert bill.total == Decimal("1799.50")

    def test_empty_bill_total_is_zero(self) -> None:
        assert Bill(patient_id="PAT-1").total == Decimal("0")

    def test_total_reflects_later_charges(self) -> None:
        """Test the total is recomputed after more charges are appended."""
        bill = Bill(patient_id="PAT-1")
        bill.add_charge(Charge("Consultation Fee", Decimal("500")))
        assert bill.total == Decimal("500")

        bill.add_charge(Charge("X-Ray", Decimal("750")))

        assert bill.total == Decimal("1250")

    def test_add_charge_returns_same_bill(self) -> None:
        bill = Bill(patient_id="PAT-1")

        assert bill.add_charge(Charge("Lab Test", Decimal("1200"))) is bill
