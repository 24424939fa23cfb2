"""Bootstrap an analyzer with real collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from loganalyzer import config
from loganalyzer.adapters.web_services import (
    JsonLinesWebService,
    LoggingEmailService,
    LoggingWebService,
)
from loganalyzer.interfaces.web_service import EmailService, WebService
from loganalyzer.service_layer.analyzers import SEAMS, LogAnalyzerBase
from loganalyzer.service_layer.factory import build_configured_manager

DEFAULT_SEAM = "constructor"


class UnknownSeamError(KeyError):
    """Raised when asked to build an analyzer for a seam that does not exist."""

    def __init__(self, seam: str) -> None:
        super().__init__(seam)
        self.seam = seam

    def __str__(self) -> str:
        return f"Unknown seam {self.seam!r}; choose from {', '.join(SEAMS)}"


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the assembled application."""

    analyzer: LogAnalyzerBase
    settings: config.Settings
    seam: str


def build_web_service(settings: config.Settings) -> WebService:
    """Build the error sink: a JSON-lines file if configured, else logging."""
    if settings.error_log is not None:
        return JsonLinesWebService(settings.error_log)
    return LoggingWebService()


def build_analyzer(
    seam: str,
    settings: config.Settings,
    web_service: WebService | None = None,
    email_service: EmailService | None = None,
) -> LogAnalyzerBase:
    """Build an analyzer for `seam`, wired to real collaborators.

    Explicit `web_service`/`email_service` arguments replace the configured
    ones.

    Raises:
        UnknownSeamError: If `seam` is not a key of `SEAMS`.
    """
    try:
        builder = SEAMS[seam]
    except KeyError as e:
        raise UnknownSeamError(seam) from e

    return builder(
        build_configured_manager(settings),
        web_service=web_service or build_web_service(settings),
        email_service=email_service or LoggingEmailService(),
        min_name_length=settings.min_name_length,
        admin_email=settings.admin_email,
    )


def bootstrap(seam: str = DEFAULT_SEAM) -> AppContainer:
    """Bootstrap an analyzer from environment configuration."""
    settings = config.load_settings()
    return AppContainer(
        analyzer=build_analyzer(seam, settings), settings=settings, seam=seam
    )
