"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading functionality, including
support for JSON configuration files, environment variable overrides, and
configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from hospital_admin.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from hospital_admin.config.schema import Config, LoggingConfig
from hospital_admin.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "HOSPITAL_ADMIN_"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.
    
    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (HOSPITAL_ADMIN_* prefix)
    3. Configuration file (JSON)
    4. Default values
    
    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json
        
    Returns:
        Validated Config instance
        
    Raises:
        ConfigurationError: If configuration is invalid or malformed
        
    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> rooms = config.rooms.room_ids
    """
    # Load .env file if present in project root
    load_dotenv()
    
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)
    
    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)
    _check_sensitive_values(config_dict)
    
    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.
    
    Args:
        config_path: Path to configuration file
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigurationError: If JSON is malformed or the file is unreadable
    """
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
            logger.info(f"Loaded configuration from {config_path}")
            return config_dict
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check file permissions and path"
            ) from e
    else:
        logger.info(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Deep copy so callers cannot mutate the defaults
        return json.loads(json.dumps(DEFAULT_CONFIG))


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with HOSPITAL_ADMIN_ prefix.
    
    Supported variables: ROOMS (comma separated), LATENCY_MS, USERNAME,
    PASSWORD, LOG_LEVEL, LOG_FILE, REDACT_PII, SEED_DEMO.
    
    Args:
        config_dict: Configuration dictionary to update
        
    Returns:
        Updated configuration dictionary with environment overrides applied
        
    Raises:
        ConfigurationError: If a numeric override is not a number
    """
    if rooms := os.getenv(f"{ENV_PREFIX}ROOMS"):
        config_dict.setdefault("rooms", {})["room_ids"] = [
            room for room in rooms.split(",") if room.strip()
        ]
        logger.debug("Override: room_ids from environment")
    
    if latency_ms := os.getenv(f"{ENV_PREFIX}LATENCY_MS"):
        try:
            config_dict.setdefault("scheduling", {})["simulated_latency_ms"] = int(
                latency_ms
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}LATENCY_MS value: {latency_ms!r}\n"
                f"Fix: Use a whole number of milliseconds"
            ) from e
        logger.debug("Override: simulated_latency_ms from environment")
    
    if username := os.getenv(f"{ENV_PREFIX}USERNAME"):
        config_dict.setdefault("auth", {})["username"] = username
        logger.debug("Override: username from environment")
    
    if password := os.getenv(f"{ENV_PREFIX}PASSWORD"):
        config_dict.setdefault("auth", {})["password"] = password
        logger.debug("Override: password from environment")
    
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")
    
    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")
    
    if redact_pii := os.getenv(f"{ENV_PREFIX}REDACT_PII"):
        config_dict.setdefault("logging", {})["redact_pii"] = _parse_bool(redact_pii)
        logger.debug("Override: redact_pii from environment")
    
    if seed_demo := os.getenv(f"{ENV_PREFIX}SEED_DEMO"):
        config_dict.setdefault("demo", {})["seed_demo_data"] = _parse_bool(seed_demo)
        logger.debug("Override: seed_demo_data from environment")
    
    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string.
    
    Args:
        value: String value to parse (case-insensitive)
        
    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "on")


def _check_sensitive_values(config_dict: dict[str, Any]) -> None:
    """Warn when a non-default password is stored in the configuration file.
    
    Args:
        config_dict: Configuration dictionary to check
    """
    if os.getenv(f"{ENV_PREFIX}PASSWORD"):
        return
    password = config_dict.get("auth", {}).get("password")
    if password and password != DEFAULT_CONFIG["auth"]["password"]:
        logger.warning(
            "Operator password found in configuration file. "
            f"Prefer the {ENV_PREFIX}PASSWORD environment variable."
        )


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.
    
    Args:
        config: Configuration instance
        
    Returns:
        LoggingConfig instance
    """
    return config.logging


def get_room_ids(config: Config) -> list[str]:
    """Get the configured room inventory.
    
    Args:
        config: Configuration instance
        
    Returns:
        Room identifiers in display order
    """
    return list(config.rooms.room_ids)
