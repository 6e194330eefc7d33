"""Interactive menu loop.

Each menu choice prompts for its inputs, calls one service operation on the
session and renders the outcome. Parsing of numbers, dates and amounts
happens here through click prompt types, so the services only ever see
typed values.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

import click

from hospital_admin.cli import render
from hospital_admin.cli.auth import Credentials
from hospital_admin.cli.params import AMOUNT, WHEN
from hospital_admin.cli.report_view import print_report
from hospital_admin.models.billing import Bill
from hospital_admin.models.people import Patient
from hospital_admin.services.session import HospitalSession
from hospital_admin.utils.exceptions import (
    AuthenticationError,
    HospitalAdminError,
    create_error_info,
)
from hospital_admin.utils.formatting import format_currency

logger = logging.getLogger(__name__)

T = TypeVar("T")

TITLE = "Smart Hospital Management System"

MENU_ITEMS = [
    ("1", "Add Patient"),
    ("2", "Add Doctor"),
    ("3", "Schedule Appointment"),
    ("4", "Delete Patient"),
    ("5", "Delete Appointment"),
    ("6", "Generate Bill"),
    ("7", "View Reports"),
    ("8", "Change Login Credentials"),
    ("9", "Assign Room"),
    ("10", "Discharge Patient"),
    ("11", "Manage Prescriptions"),
    ("12", "Logout"),
    ("13", "Exit"),
]

EXIT_CHOICE = "13"


class HospitalMenu:
    """Menu-driven console over one HospitalSession.

    Args:
        session: Session holding all services
        credentials: Operator credentials checked at login
        currency_symbol: Symbol used when printing amounts
    """

    def __init__(
        self,
        session: HospitalSession,
        credentials: Credentials,
        currency_symbol: str = "₹",
    ) -> None:
        self.session = session
        self.credentials = credentials
        self.currency_symbol = currency_symbol
        self._payment_handle: Optional[int] = None
        self.actions: Dict[str, Callable[[], None]] = {
            "1": self.add_patient,
            "2": self.add_doctor,
            "3": self.schedule_appointment,
            "4": self.delete_patient,
            "5": self.delete_appointment,
            "6": self.generate_bill,
            "7": self.view_reports,
            "8": self.change_credentials,
            "9": self.assign_room,
            "10": self.discharge_patient,
            "11": self.manage_prescriptions,
            "12": self.logout,
        }

    # ------------------------------------------------------------------
    # Session loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Log in, then serve menu choices until Exit."""
        while not self.login():
            pass

        self._payment_handle = self.session.ledger.subscribe(self.announce_payment)
        logger.debug(
            f"{self.session.ledger.observer_count} payment observer(s) registered"
        )
        try:
            running = True
            while running:
                render.title_banner(TITLE)
                for number, label in MENU_ITEMS:
                    click.echo(f"{number}. {label}")
                choice = self.ask("Enter choice").strip()
                running = self.handle(choice)
                if running:
                    click.pause("\nPress Enter to continue...")
        finally:
            self.session.ledger.unsubscribe(self._payment_handle)

        render.header("Goodbye!")

    def handle(self, choice: str) -> bool:
        """Run one menu choice.

        Returns:
            False when the operator chose Exit
        """
        if choice == EXIT_CHOICE:
            return False

        action = self.actions.get(choice)
        if action is None:
            render.warn("Invalid choice")
            return True

        try:
            action()
        except HospitalAdminError as e:
            info = create_error_info(e)
            logger.info(f"{info.error_type}: {info.message}")
            render.error(info.message)
            render.hint(info.remediation)
        return True

    def login(self) -> bool:
        render.title_banner(f"{TITLE} - Login")
        username = self.ask("Username")
        password = self.ask("Password", hide_input=True)
        try:
            self.credentials.verify(username, password)
        except AuthenticationError as e:
            render.error(str(e))
            return False
        render.info("Login Successful!")
        return True

    def announce_payment(self, bill: Bill) -> None:
        name = self.session.roster.name_of(bill.patient_id)
        render.info(f"Bill {bill.id} paid {self.money(bill)} by {name}")

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_patient(self) -> None:
        render.header("Add Patient")
        name = self.ask("Enter Patient Name")
        condition = self.ask("Enter Condition", default="")
        patient = self.session.add_patient(name, condition)
        render.info(f"Patient {patient.name} added.")

    def add_doctor(self) -> None:
        render.header("Add Doctor")
        name = self.ask("Enter Doctor Name")
        specialty = self.ask("Enter Specialty", default="")
        doctor = self.session.add_doctor(name, specialty)
        render.info(f"Doctor {doctor.name} ({doctor.specialty}) added.")

    def schedule_appointment(self) -> None:
        render.header("Schedule Appointment")
        patients = self.session.roster.patients()
        doctors = self.session.roster.doctors()
        if not patients or not doctors:
            render.error("Need at least 1 patient and 1 doctor.")
            return

        scheduler = self.session.scheduler
        patient = self.choose(
            patients, ["Number", "Name", "Condition"],
            lambda p: [p.name, p.condition], "Choose Patient (number)",
        )
        doctor = self.choose(
            doctors, ["Number", "Name", "Specialty", "Booked"],
            lambda d: [d.name, d.specialty, str(len(scheduler.for_doctor(d.id)))],
            "Choose Doctor (number)",
        )
        when = click.prompt("  => Enter Date & Time (yyyy-mm-dd HH:mm)", type=WHEN)

        self.session.book_now(patient.id, doctor.id, when)
        render.info(
            f"Appointment booked for {patient.name} with {doctor.name} on {when:%Y-%m-%d %H:%M}"
        )

    def delete_patient(self) -> None:
        render.header("Delete Patient")
        patients = self.session.roster.patients()
        if not patients:
            render.error("No patients available.")
            return

        patient = self.choose(
            patients, ["Number", "Name", "Condition", "Status"],
            lambda p: [p.name, p.condition, p.status], "Choose Patient (number)",
        )
        if self.session.remove_patient(patient.id):
            render.info(f"Patient {patient.name} deleted.")
            appointments = self.session.scheduler.for_patient(patient.id)
            bills = self.session.ledger.bills_for(patient.id)
            if appointments or bills:
                render.warn(
                    f"{len(appointments)} appointment(s) and {len(bills)} bill(s) "
                    f"remain on record for {patient.name}."
                )
        else:
            render.error(f"Patient {patient.name} could not be deleted.")

    def delete_appointment(self) -> None:
        render.header("Delete Appointment")
        appointments = self.session.scheduler.all()
        if not appointments:
            render.error("No appointments available.")
            return

        roster = self.session.roster
        appointment = self.choose(
            appointments, ["Number", "Patient", "Doctor", "DateTime"],
            lambda a: [
                roster.name_of(a.patient_id),
                roster.name_of(a.doctor_id),
                f"{a.when:%Y-%m-%d %H:%M}",
            ],
            "Choose Appointment (number)",
        )
        if self.session.scheduler.delete(appointment.id):
            render.info("Appointment deleted.")
        else:
            render.error("Could not delete appointment.")

    def generate_bill(self) -> None:
        render.header("Generate Bill")
        patients = self.session.roster.patients()
        if not patients:
            render.error("No patients available.")
            return

        patient = self.choose(
            patients, ["Number", "Name", "Condition"],
            lambda p: [p.name, p.condition], "Choose Patient (number)",
        )

        charges = []
        adding = True
        while adding:
            description = self.ask("Enter Service/Charge Description")
            amount = click.prompt(f"  => Enter Amount ({self.currency_symbol})", type=AMOUNT)
            charges.append((description, amount))
            adding = click.confirm("  => Add more charges?", default=False)

        bill = self.session.bill_patient(patient.id, charges)
        render.info(f"Bill total: {self.money(bill)}")

    def view_reports(self) -> None:
        print_report(self.session.report(), self.currency_symbol)

    def change_credentials(self) -> None:
        render.header("Change Login Credentials")
        username = self.ask("Enter New Username")
        password = self.ask("Enter New Password", hide_input=True, confirmation_prompt=True)
        self.credentials.change(username, password)
        render.info("Login credentials updated successfully.")

    def assign_room(self) -> None:
        render.header("Assign Room")
        patients = [p for p in self.session.roster.patients() if not p.is_admitted]
        if not patients:
            render.error("No available patients to assign rooms.")
            return

        patient = self.choose(
            patients, ["Number", "Name", "Condition"],
            lambda p: [p.name, p.condition], "Choose Patient (number)",
        )

        available = self.session.rooms.available_rooms()
        if not available:
            render.error("No rooms available.")
            return

        render.info("Available Rooms: " + ", ".join(available))
        room = self.ask("Enter Room Number").strip()
        self.session.rooms.assign(patient, room, strict=True)
        render.info(f"Room {room} assigned to {patient.name}.")

    def discharge_patient(self) -> None:
        render.header("Discharge Patient")
        rooms = self.session.rooms
        patients = [p for p in self.session.roster.patients() if p.is_admitted]
        if not patients:
            render.error("No admitted patients available.")
            return

        patient = self.choose(
            patients, ["Number", "Name", "Room"],
            lambda p: [p.name, rooms.room_of(p.id) or ""], "Choose Patient (number)",
        )
        self.session.rooms.discharge(patient, strict=True)
        render.info(f"Patient {patient.name} discharged.")

    def manage_prescriptions(self) -> None:
        render.header("Manage Prescriptions")
        patients = self.session.roster.patients()
        if not patients:
            render.error("No patients available.")
            return

        patient: Patient = self.choose(
            patients, ["Number", "Name", "Condition"],
            lambda p: [p.name, p.condition], "Choose Patient (number)",
        )

        current = self.session.prescriptions.list(patient)
        render.info("Current Prescriptions: " + (", ".join(current) if current else "None"))
        medication = self.ask("Enter Medication to Add (or leave empty to skip)", default="")
        if medication.strip():
            self.session.prescriptions.add(patient, medication.strip())
            render.info(f"Added {medication.strip()} to {patient.name}'s prescriptions.")

    def logout(self) -> None:
        while not self.login():
            pass

    # ------------------------------------------------------------------
    # Prompt helpers
    # ------------------------------------------------------------------

    def ask(self, prompt: str, **kwargs) -> str:
        kwargs.setdefault("show_default", False)
        return click.prompt(f"  => {prompt}", **kwargs)

    def choose(
        self,
        items: List[T],
        headers: Sequence[str],
        get_cells: Callable[[T], Sequence[str]],
        prompt: str,
    ) -> T:
        """Show numbered rows and return the one the operator picks."""
        render.table(
            list(enumerate(items, start=1)),
            headers,
            lambda numbered: [str(numbered[0]), *get_cells(numbered[1])],
        )
        index = click.prompt(f"  => {prompt}", type=click.IntRange(1, len(items)))
        return items[index - 1]

    def money(self, bill: Bill) -> str:
        return format_currency(bill.total, self.currency_symbol)
