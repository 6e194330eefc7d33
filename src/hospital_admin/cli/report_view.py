"""Rendering of the hospital report tables."""

from hospital_admin.cli import render
from hospital_admin.services.reporting import HospitalReport
from hospital_admin.utils.formatting import DEFAULT_CURRENCY_SYMBOL, format_currency


def print_report(report: HospitalReport, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
    """Print doctor, patient and billing summaries."""
    render.header("Hospital Reports")

    render.table(
        report.doctors,
        ["Doctor Name", "Specialty", "Appointments"],
        lambda d: [d.name, d.specialty, str(d.appointment_count)],
    )

    render.table(
        report.patients,
        ["Patient Name", "Condition", "Room", "Status"],
        lambda p: [p.name, p.condition, p.room_number, p.status],
    )

    if report.top_payer is not None:
        render.info(
            f"Top Payer: {report.top_payer.name} -> "
            f"{format_currency(report.top_payer.total, currency_symbol)}"
        )

    render.info(f"Total Appointments: {report.total_appointments}")
    render.info(f"Total Bills: {report.total_bills}")
    render.info(f"Available Rooms: {', '.join(report.available_rooms) or 'None'}")
