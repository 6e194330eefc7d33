"""Operator login for the console session.

Credentials are plaintext and held in memory only, matching the single
operator model of the console. There is no hashing or lockout.
"""

import logging
from dataclasses import dataclass

from hospital_admin.config.schema import AuthConfig
from hospital_admin.logging_audit import log_audit_event
from hospital_admin.utils.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    """Username and password accepted by the login prompt."""

    username: str
    password: str

    @classmethod
    def from_config(cls, config: AuthConfig) -> "Credentials":
        return cls(username=config.username, password=config.password)

    def verify(self, username: str, password: str) -> None:
        """Check a login attempt.

        Raises:
            AuthenticationError: If either value does not match
        """
        if username != self.username or password != self.password:
            log_audit_event(
                "LOGIN",
                {"status": "failure", "username": username, "error_message": "bad credentials"},
            )
            raise AuthenticationError("Invalid credentials. Try again.")
        log_audit_event("LOGIN", {"status": "success", "username": username})

    def change(self, username: str, password: str) -> None:
        """Replace the credentials for the rest of the session.

        Raises:
            ValidationError: If the new username is blank
        """
        if not username.strip():
            raise ValidationError("Username must not be empty")
        self.username = username
        self.password = password
        logger.info("Login credentials updated")
