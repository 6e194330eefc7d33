"""Unit tests for report aggregation."""

from datetime import datetime, timedelta
from decimal import Decimal

from hospital_admin.models.appointment import Appointment
from hospital_admin.models.billing import Bill, Charge
from hospital_admin.models.people import Doctor, Patient
from hospital_admin.services.reporting import build_report, find_top_payer, totals_by_patient
from hospital_admin.services.rooms import RoomAllocator


def _bill(patient_id: str, *amounts: str) -> Bill:
    bill = Bill(patient_id=patient_id)
    for amount in amounts:
        bill.add_charge(Charge("Charge", Decimal(amount)))
    return bill


class TestBuildReport:
    """Test the aggregated hospital report."""

    def test_counts_appointments_per_doctor(
        self, rooms: RoomAllocator, patient: Patient, doctor: Doctor, when: datetime
    ) -> None:
        # Arrange
        idle = Doctor(name="Dr. Gambhir", specialty="Orthopedics")
        appointments = [
            Appointment(patient.id, doctor.id, when),
            Appointment(patient.id, doctor.id, when + timedelta(hours=1)),
        ]

        # Act
        report = build_report(appointments, [], [patient, doctor, idle], rooms)

        # Assert
        assert [(d.name, d.appointment_count) for d in report.doctors] == [
            ("Dr. Ms Dhoni", 2),
            ("Dr. Gambhir", 0),
        ]
        assert report.total_appointments == 2

    def test_patient_rows_reflect_admission(
        self, rooms: RoomAllocator, patient: Patient, other_patient: Patient
    ) -> None:
        rooms.assign(other_patient, "101")

        report = build_report([], [], [patient, other_patient], rooms)

        assert [(p.name, p.room_number, p.status) for p in report.patients] == [
            ("Rohit Sharma", "", "Discharged"),
            ("Virat Kohli", "101", "Admitted"),
        ]
        assert report.available_rooms == ["102", "103", "201", "202"]

    def test_empty_session(self, rooms: RoomAllocator) -> None:
        report = build_report([], [], [], rooms)

        assert report.doctors == []
        assert report.patients == []
        assert report.top_payer is None
        assert report.total_appointments == 0
        assert report.total_bills == 0

    def test_total_bills_counts_paid_and_unpaid(self, rooms: RoomAllocator, patient: Patient) -> None:
        paid = _bill(patient.id, "100")
        paid.is_paid = True
        unpaid = _bill(patient.id, "50")

        report = build_report([], [paid, unpaid], [patient], rooms)

        assert report.total_bills == 2
        assert report.top_payer is not None
        assert report.top_payer.total == Decimal("150")


class TestTopPayer:
    """Test top payer selection."""

    def test_sums_across_bills(self, patient: Patient, other_patient: Patient) -> None:
        bills = [
            _bill(patient.id, "500"),
            _bill(other_patient.id, "900"),
            _bill(patient.id, "600"),
        ]

        top = find_top_payer(bills, [patient, other_patient])

        assert top is not None
        assert top.name == "Rohit Sharma"
        assert top.total == Decimal("1100")

    def test_tie_goes_to_first_billed(self, patient: Patient, other_patient: Patient) -> None:
        bills = [_bill(other_patient.id, "700"), _bill(patient.id, "700")]

        top = find_top_payer(bills, [patient, other_patient])

        assert top is not None
        assert top.patient_id == other_patient.id

    def test_removed_patient_shows_unknown(self, patient: Patient) -> None:
        top = find_top_payer([_bill(patient.id, "250")], [])

        assert top is not None
        assert top.name == "Unknown"
        assert top.total == Decimal("250")

    def test_no_bills(self) -> None:
        assert find_top_payer([], []) is None

    def test_totals_by_patient_first_seen_order(self) -> None:
        totals = totals_by_patient([_bill("B", "1"), _bill("A", "2"), _bill("B", "3")])

        assert list(totals.items()) == [("B", Decimal("4")), ("A", Decimal("2"))]
