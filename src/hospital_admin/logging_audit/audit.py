"""Audit trail for state-changing service operations.

Every mutation of session state (roster, appointments, rooms, prescriptions,
payments) emits one structured line through this module.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Fields rendered first, in this order, when present
FIELD_ORDER = [
    "status",
    "patient_id",
    "doctor_id",
    "appointment_id",
    "bill_id",
    "room",
    "amount",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.
    
    Audit events are logged at INFO level for successful operations and
    WARNING level for rejected ones.
    
    Args:
        event_type: Type of operation (e.g., "ROOM_ASSIGNED", "BILL_PAID",
                   "APPOINTMENT_SCHEDULED")
        details: Dictionary with event details. Common fields include:
                - status: "success" or "failure"
                - patient_id / doctor_id / appointment_id / bill_id
                - room: Room identifier
                - amount: Monetary amount
                - error_message: Rejection reason (if status is failure)
                
    Example:
        >>> log_audit_event("ROOM_ASSIGNED", {
        ...     "status": "success",
        ...     "patient_id": "PAT-1",
        ...     "room": "101",
        ... })
    """
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))
    
    message_parts = [f"AUDIT [{event_type}]"]
    
    for field in FIELD_ORDER:
        if field in details:
            message_parts.append(f"{field}={details[field]}")
    
    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")
    
    audit_message = " | ".join(message_parts)
    
    if details.get("status") == "failure":
        logger.warning(audit_message)
    else:
        logger.info(audit_message)
