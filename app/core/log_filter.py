"""Logging filter for redacting sensitive data from log messages."""

import logging
import re
from typing import Pattern

REDACTED = "***REDACTED***"


class SensitiveDataFilter(logging.Filter):
    """Filter to redact sensitive data from log messages.

    Redacts:
    - The configured service API key wherever it appears verbatim
    - X-API-Key and Authorization header values
    - API_KEY environment assignments and key=value style secrets
    """

    def __init__(self, secrets: list[str] | None = None):
        """Initialize filter with redaction patterns.

        Args:
            secrets: Literal secret values to redact (e.g. the service API key)
        """
        super().__init__()

        self.secrets = [secret for secret in (secrets or []) if secret]

        # Order matters - header patterns come before the generic key=value pattern
        self.patterns: list[tuple[Pattern, str]] = [
            (
                re.compile(r"(?i)(Authorization):\s+(Bearer\s+)?([^\s,]+)"),
                rf"\1: {REDACTED}",
            ),
            (
                re.compile(r"(?i)(X-API-Key):\s*([^\s,]+)"),
                rf"\1: {REDACTED}",
            ),
            (
                re.compile(r"(?i)(API_KEY)=([^\s,\)]+)"),
                rf"\1={REDACTED}",
            ),
            (
                re.compile(
                    r"(?i)(api[_-]?key|apikey|token|secret|password)['\"]?\s*[:=]\s*['\"]?"
                    r"([A-Za-z0-9_\-\.]{12,})"
                ),
                rf"\1={REDACTED}",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record by redacting sensitive data.

        Args:
            record: Log record to filter

        Returns:
            True (always pass the record after redaction)
        """
        if record.msg:
            record.msg = self.redact(str(record.msg))

        # Redact args (used in % formatting)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        return True

    def _redact_value(self, value):
        # Only strings, so %d and friends still format
        if isinstance(value, str):
            return self.redact(value)
        return value

    def redact(self, text: str) -> str:
        """Apply redaction patterns to text.

        Args:
            text: Text to redact

        Returns:
            Text with sensitive data redacted
        """
        for secret in self.secrets:
            text = text.replace(secret, REDACTED)
        for pattern, replacement in self.patterns:
            text = pattern.sub(replacement, text)
        return text
