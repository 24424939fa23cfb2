"""Interfaces for reporting analysis errors.

The analyzer reports problems it finds (such as file names that are too
short) to a `WebService`. When that service is unavailable it falls back to
an `EmailService`. Both are outbound collaborators and both are substituted
in tests.
"""

import abc
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ErrorInfo:
    """An error reported by the analyzer.

    Attributes:
        severity: A standard `logging` level number (e.g. `logging.WARNING`).
        message: Human-readable description of the problem.
    """

    severity: int
    message: str


class WebService(abc.ABC):
    """Contract for an external error sink."""

    @abc.abstractmethod
    def log_error(self, error: ErrorInfo) -> None:
        """Report an error.

        Raises:
            Exception: Any exception signals that the sink is unavailable.
        """


class EmailService(abc.ABC):
    """Contract for sending a notification email."""

    @abc.abstractmethod
    def send_email(self, to: str, subject: str, body: str) -> None:
        """Send an email to `to`."""
