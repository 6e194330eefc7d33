"""Hospital administration console.

In-memory service layer for patients, doctors, appointments, room
assignments, prescriptions and billing, driven by a click-based menu.
"""

__version__ = "0.1.0"
