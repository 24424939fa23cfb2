"""Error sinks and email senders for LOGANALYZER.

`LoggingWebService` and `LoggingEmailService` route reports through the
standard `logging` machinery (and so through the console handler and the
flight recorder). `JsonLinesWebService` appends each report to a file, one
JSON object per line, standing in for a remote endpoint.
"""

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path

from loganalyzer.interfaces.web_service import EmailService, ErrorInfo, WebService

# pylint: disable=too-few-public-methods

REPORT_LOGGER_NAME = "loganalyzer.reports"  # pragma: no mutate
MAIL_LOGGER_NAME = "loganalyzer.mail"  # pragma: no mutate


class LoggingWebService(WebService):
    """Reports errors to a logger at the error's own severity."""

    def __init__(self, logger_name: str = REPORT_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(logger_name)

    def log_error(self, error: ErrorInfo) -> None:
        self._logger.log(error.severity, error.message)


class JsonLinesWebService(WebService):
    """Appends errors to a JSON-lines file.

    Each line holds `timestamp` (UTC, ISO 8601), `severity` (level name) and
    `message`. Parent directories are created on first write.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Destination file."""
        return self._path

    def log_error(self, error: ErrorInfo) -> None:
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "severity": logging.getLevelName(error.severity),
            "message": error.message,
        }
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")


class LoggingEmailService(EmailService):
    """Records outgoing mail through `logging` instead of an SMTP server."""

    def __init__(self, logger_name: str = MAIL_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(logger_name)

    def send_email(self, to: str, subject: str, body: str) -> None:
        self._logger.warning("mail to=%s subject=%r body=%r", to, subject, body)
