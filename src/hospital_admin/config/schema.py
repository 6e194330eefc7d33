"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RoomsConfig(BaseModel):
    """Configuration for the ward room inventory.
    
    Attributes:
        room_ids: Room identifiers that may be assigned, in display order
    """
    
    room_ids: list[str] = Field(
        default_factory=lambda: ["101", "102", "103", "201", "202"],
        description="Assignable room identifiers",
    )
    
    @field_validator("room_ids")
    @classmethod
    def validate_room_ids(cls, v: list[str]) -> list[str]:
        """Validate the room inventory is non-empty and free of duplicates.
        
        Args:
            v: Room identifiers to validate
            
        Returns:
            Stripped room identifiers
            
        Raises:
            ValueError: If the list is empty, has blank ids or duplicates
        """
        rooms = [room.strip() for room in v]
        if not rooms:
            raise ValueError("Room inventory is empty. Configure at least one room id")
        if any(not room for room in rooms):
            raise ValueError("Room ids must not be blank")
        duplicates = sorted({room for room in rooms if rooms.count(room) > 1})
        if duplicates:
            raise ValueError(f"Duplicate room ids: {', '.join(duplicates)}")
        return rooms


class SchedulingConfig(BaseModel):
    """Configuration for appointment scheduling.
    
    Attributes:
        simulated_latency_ms: Delay awaited by every schedule call
    """
    
    simulated_latency_ms: int = Field(
        default=100,
        ge=0,
        description="Simulated backing-store latency in milliseconds",
    )


class BillingConfig(BaseModel):
    """Configuration for billing display."""
    
    currency_symbol: str = Field(default="₹", description="Currency symbol for amounts")


class AuthConfig(BaseModel):
    """Operator login credentials.
    
    Credentials are plaintext and live only in memory for the session.
    """
    
    username: str = Field(default="admin", min_length=1)
    password: str = Field(default="1234")


class LoggingConfig(BaseModel):
    """Configuration for logging.
    
    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact patient names from logs
    """
    
    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/hospital-admin.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact patient names from logs"
    )
    
    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.
        
        Args:
            v: Log level string
            
        Returns:
            Validated log level (uppercase)
            
        Raises:
            ValueError: If log level is not valid
        """
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return v_upper


class DemoConfig(BaseModel):
    """Startup demo data toggle."""
    
    seed_demo_data: bool = True


class Config(BaseModel):
    """Root configuration model.
    
    Attributes:
        rooms: Ward room inventory
        scheduling: Appointment scheduling settings
        billing: Billing display settings
        auth: Operator credentials
        logging: Logging configuration
        demo: Demo data settings
        
    Example:
        >>> config = Config(rooms=RoomsConfig(room_ids=["A1", "A2"]))
        >>> config.rooms.room_ids
        ['A1', 'A2']
        >>> config.scheduling.simulated_latency_ms
        100
    """
    
    rooms: RoomsConfig = RoomsConfig()
    scheduling: SchedulingConfig = SchedulingConfig()
    billing: BillingConfig = BillingConfig()
    auth: AuthConfig = AuthConfig()
    logging: LoggingConfig = LoggingConfig()
    demo: DemoConfig = DemoConfig()
