"""Custom log formatters for the hospital administration console.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that redacts patient names from log messages.
    
    Applies regex-based pattern matching to identify names in the two shapes
    the services log them: ``name='Rohit Sharma'`` style key/value pairs and
    ``Patient: Rohit Sharma`` labels.
    
    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction
        
    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """
    
    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii
        
        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # name="Rohit Sharma", name='Virat Kohli', name=Rohit Sharma | ...
            (re.compile(r'\bname=(?:"[^"]*"|\'[^\']*\'|[^|,\n]*[^|,\s])'), 'name=[NAME-REDACTED]'),
            # "Patient: Rohit Sharma"
            (re.compile(r'(Patient):\s+[A-Z][\w.]*(?:\s+[A-Z][\w.]*)*'),
             r'\1: [NAME-REDACTED]'),
        ]
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.
        
        Args:
            record: Log record to format
            
        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)
        
        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)
        
        return original
