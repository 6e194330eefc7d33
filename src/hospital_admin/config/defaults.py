"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "rooms": {
        # Ward inventory available for assignment
        "room_ids": ["101", "102", "103", "201", "202"],
    },
    "scheduling": {
        # Simulated backing-store round trip for each booking
        "simulated_latency_ms": 100,
    },
    "billing": {
        "currency_symbol": "₹",
    },
    "auth": {
        "username": "admin",
        "password": "1234",
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/hospital-admin.log",
        "redact_pii": False,
    },
    "demo": {
        # Seed the demo roster at startup
        "seed_demo_data": True,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
