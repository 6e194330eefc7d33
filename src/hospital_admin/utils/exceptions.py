"""Custom exception classes for the hospital administration service layer.

All exceptions inherit from HospitalAdminError to allow catching all custom
exceptions at the menu boundary. Every error kind here is recoverable: the
caller reports it and the session continues.
"""

from dataclasses import dataclass
from typing import Optional


class HospitalAdminError(Exception):
    """Base exception for all hospital administration errors."""

    pass


class ValidationError(HospitalAdminError):
    """Raised when input data validation fails.
    
    Examples:
        - Roster CSV with missing columns
        - Unknown person kind in a roster row
        - Empty name for a new patient or doctor
    """

    pass


class ConfigurationError(HospitalAdminError):
    """Raised when configuration loading or validation fails.
    
    Examples:
        - Malformed JSON configuration file
        - Empty room inventory
        - Invalid log level
    """

    pass


class NotFoundError(HospitalAdminError):
    """Raised when a lookup by identifier finds nothing.
    
    Examples:
        - Patient id not present in the roster
        - Doctor id that refers to a patient
    """

    pass


class DuplicateAppointmentError(HospitalAdminError):
    """Raised when an appointment with the same patient, doctor and time exists."""

    pass


class RoomAssignmentError(HospitalAdminError):
    """Base exception for room allocation failures."""

    pass


class InvalidRoomError(RoomAssignmentError):
    """Raised when a room id is not part of the configured inventory."""

    pass


class RoomOccupiedError(RoomAssignmentError):
    """Raised when a room is already held by another patient."""

    pass


class NotAdmittedError(RoomAssignmentError):
    """Raised when discharging a patient who holds no room."""

    pass


class AuthenticationError(HospitalAdminError):
    """Raised when operator credentials do not match."""

    pass


@dataclass
class ErrorInfo:
    """Structured error information for the menu layer.
    
    Attributes:
        error_type: Exception class name (e.g., "RoomOccupiedError")
        message: User-facing error message
        remediation: Actionable guidance for the operator
        technical_details: Optional chained cause for debugging
        
    Example:
        >>> info = create_error_info(RoomOccupiedError("Room 101 is occupied"))
        >>> info.remediation
        'Pick one of the rooms listed as available, or discharge the current occupant first.'
    """

    error_type: str
    message: str
    remediation: str
    technical_details: Optional[str] = None


def create_error_info(exception: Exception) -> ErrorInfo:
    """Create structured error information from an exception.
    
    Args:
        exception: Exception raised by a service operation
        
    Returns:
        ErrorInfo with a remediation hint for the operator
    """
    technical_details = None
    if exception.__cause__ is not None:
        technical_details = (
            f"Caused by: {type(exception.__cause__).__name__}: {exception.__cause__}"
        )

    return ErrorInfo(
        error_type=type(exception).__name__,
        message=str(exception),
        remediation=_generate_remediation(exception),
        technical_details=technical_details,
    )


def _generate_remediation(exception: Exception) -> str:
    """Generate an actionable remediation message for an error.
    
    Args:
        exception: Exception that occurred
        
    Returns:
        Remediation message
    """
    if isinstance(exception, DuplicateAppointmentError):
        return (
            "An identical appointment already exists. "
            "Choose a different date/time or a different doctor."
        )

    if isinstance(exception, InvalidRoomError):
        return "Enter one of the configured room numbers shown in the available list."

    if isinstance(exception, RoomOccupiedError):
        return (
            "Pick one of the rooms listed as available, "
            "or discharge the current occupant first."
        )

    if isinstance(exception, NotAdmittedError):
        return "Only admitted patients can be discharged. Assign a room first."

    if isinstance(exception, NotFoundError):
        return "The record may have been deleted. Refresh the list and choose again."

    if isinstance(exception, AuthenticationError):
        return "Check the username and password. Credentials are case-sensitive."

    if isinstance(exception, ConfigurationError):
        return (
            "Configuration error. Check config/config.json for missing or invalid values. "
            "Use examples/config.example.json as template."
        )

    if isinstance(exception, ValidationError):
        return (
            "Input validation failed. Review the roster file or the values entered. "
            "Check examples/roster_sample.csv for the expected format."
        )

    return "Review the error message and check the log file for complete details."
