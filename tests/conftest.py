"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Generator

import pytest

from hospital_admin.models.people import Doctor, Patient
from hospital_admin.services.rooms import RoomAllocator
from hospital_admin.services.scheduler import AppointmentScheduler
from hospital_admin.services.session import HospitalSession


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.
    
    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def examples_dir(project_root: Path) -> Path:
    """
    Return the examples directory path.
    
    Args:
        project_root: Project root directory fixture.
    
    Returns:
        Path: Absolute path to the examples directory.
    """
    return project_root / "examples"


@pytest.fixture(autouse=True)
def restore_root_handlers() -> Generator[None, None, None]:
    """Remove log handlers a test installed through configure_logging."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)


@pytest.fixture
def session() -> HospitalSession:
    """Empty session with no scheduling latency."""
    return HospitalSession(scheduler=AppointmentScheduler(latency_seconds=0))


@pytest.fixture
def rooms() -> RoomAllocator:
    """Allocator over the default five-room ward."""
    return RoomAllocator(["101", "102", "103", "201", "202"])


@pytest.fixture
def patient() -> Patient:
    return Patient(name="Rohit Sharma", condition="Fever")


@pytest.fixture
def other_patient() -> Patient:
    return Patient(name="Virat Kohli", condition="Fractured Arm")


@pytest.fixture
def doctor() -> Doctor:
    return Doctor(name="Dr. Ms Dhoni", specialty="General Medicine")


@pytest.fixture
def when() -> datetime:
    return datetime(2030, 1, 15, 10, 30)


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run CLI tests in an empty directory with zero latency and a temp log file.
    
    Args:
        tmp_path: Pytest's temporary directory fixture.
        monkeypatch: Pytest's monkeypatch fixture.
    
    Returns:
        Path: The working directory used for the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOSPITAL_ADMIN_LATENCY_MS", "0")
    monkeypatch.setenv("HOSPITAL_ADMIN_LOG_FILE", str(tmp_path / "logs" / "test.log"))
    for name in ("HOSPITAL_ADMIN_USERNAME", "HOSPITAL_ADMIN_PASSWORD", "HOSPITAL_ADMIN_ROOMS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
