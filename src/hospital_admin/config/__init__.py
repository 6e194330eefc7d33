"""Config module.

This module provides configuration management functionality.
"""

from hospital_admin.config.manager import (
    get_logging_config,
    get_room_ids,
    load_config,
)
from hospital_admin.config.schema import (
    AuthConfig,
    BillingConfig,
    Config,
    DemoConfig,
    LoggingConfig,
    RoomsConfig,
    SchedulingConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_logging_config",
    "get_room_ids",
    # Configuration models
    "AuthConfig",
    "BillingConfig",
    "Config",
    "DemoConfig",
    "LoggingConfig",
    "RoomsConfig",
    "SchedulingConfig",
]
