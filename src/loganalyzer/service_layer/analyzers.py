"""Log analyzers, one per dependency-injection seam.

Every analyzer answers the same two questions about a log file name. Is it
valid (does the extension manager accept it)? Is it too short (if so, it is
reported to the web service, with an email fallback)? They differ only in
how they obtain their extension manager:

1. `LogAnalyzer`: the manager is passed to the constructor.
2. `PropertyLogAnalyzer`: a real manager is built by default and can be
   replaced through the `manager` property.
3. `FactoryLogAnalyzer`: the manager comes from an
   `ExtensionManagerFactory`, whose created instance can be overridden.
4. `FactoryMethodLogAnalyzer`: the manager comes from the `get_manager()`
   factory method, which a test subclass overrides.
5. `OverridableLogAnalyzer`: the check itself is the `is_valid()` method,
   which a test subclass overrides to bypass the manager entirely.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable
from dataclasses import dataclass

from loganalyzer.adapters.extension_managers import FileExtensionManager
from loganalyzer.config import DEFAULT_ADMIN_EMAIL
from loganalyzer.domain.file_names import (
    DEFAULT_MIN_NAME_LENGTH,
    ensure_file_name,
    is_too_short,
)
from loganalyzer.interfaces.extension_manager import ExtensionManager
from loganalyzer.interfaces.web_service import EmailService, ErrorInfo, WebService
from loganalyzer.service_layer.factory import ExtensionManagerFactory

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)

FALLBACK_SUBJECT = "can't log"  # pragma: no mutate


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of `LogAnalyzerBase.analyze`.

    Attributes:
        file_name: The validated (stripped) file name.
        valid: Whether the extension manager accepted the name.
        too_short: Whether the name is shorter than the minimum length.
        reported: Whether an error was delivered to the web service.
        emailed: Whether the fallback email was sent.
    """

    file_name: str
    valid: bool
    too_short: bool
    reported: bool = False
    emailed: bool = False


class LogAnalyzerBase(abc.ABC):
    """Behaviour shared by every seam.

    Subclasses only decide where `is_valid()` gets its answer from.

    Raises:
        ValueError: If `min_name_length` is below 1.
    """

    def __init__(
        self,
        web_service: WebService | None = None,
        email_service: EmailService | None = None,
        *,
        min_name_length: int = DEFAULT_MIN_NAME_LENGTH,
        admin_email: str = DEFAULT_ADMIN_EMAIL,
    ) -> None:
        if min_name_length < 1:
            raise ValueError(
                f"min_name_length must be at least 1, got {min_name_length}"
            )
        self.web_service = web_service
        self.email_service = email_service
        self.min_name_length = min_name_length
        self.admin_email = admin_email
        self.was_last_file_name_valid: bool | None = None

    @abc.abstractmethod
    def is_valid(self, file_name: str) -> bool:
        """Decide whether an already-validated name is a supported log file."""

    def is_valid_log_file_name(self, file_name: str | None) -> bool:
        """Return True if `file_name` is a supported log file name.

        Also records the answer in `was_last_file_name_valid`.

        Raises:
            MissingFileNameError: If the name is None, empty or whitespace.
        """
        self.was_last_file_name_valid = False
        name = ensure_file_name(file_name)
        valid = self.is_valid(name)
        self.was_last_file_name_valid = valid
        return valid

    def analyze(self, file_name: str | None) -> AnalysisResult:
        """Validate `file_name` and report it if it is too short.

        A too-short name is reported to the web service as a WARNING. If the
        web service raises, the failure is emailed to `admin_email` instead.
        Without a web service only validity and shortness are computed.

        Raises:
            MissingFileNameError: If the name is None, empty or whitespace.
        """
        name = ensure_file_name(file_name)
        valid = self.is_valid_log_file_name(name)
        too_short = is_too_short(name, self.min_name_length)
        if not too_short or self.web_service is None:
            return AnalysisResult(name, valid=valid, too_short=too_short)

        error = ErrorInfo(logging.WARNING, f"Filename too short: {name}")
        try:
            self.web_service.log_error(error)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Web service failed for %r: %s", name, e)
            emailed = self._send_fallback(str(e))
            return AnalysisResult(
                name, valid=valid, too_short=True, reported=False, emailed=emailed
            )
        return AnalysisResult(name, valid=valid, too_short=True, reported=True)

    def _send_fallback(self, body: str) -> bool:
        if self.email_service is None:
            logger.error("No email service configured; report dropped: %s", body)
            return False
        self.email_service.send_email(self.admin_email, FALLBACK_SUBJECT, body)
        return True


class LogAnalyzer(LogAnalyzerBase):
    """Constructor injection: the extension manager is a required argument."""

    def __init__(
        self,
        manager: ExtensionManager,
        web_service: WebService | None = None,
        email_service: EmailService | None = None,
        **kwargs,
    ) -> None:
        super().__init__(web_service, email_service, **kwargs)
        self._manager = manager

    def is_valid(self, file_name: str) -> bool:
        return self._manager.is_valid(file_name)


class PropertyLogAnalyzer(LogAnalyzerBase):
    """Property injection: a real manager by default, replaceable by setter."""

    def __init__(
        self,
        web_service: WebService | None = None,
        email_service: EmailService | None = None,
        **kwargs,
    ) -> None:
        super().__init__(web_service, email_service, **kwargs)
        self._manager: ExtensionManager = FileExtensionManager()

    @property
    def manager(self) -> ExtensionManager:
        """The extension manager consulted by `is_valid()`."""
        return self._manager

    @manager.setter
    def manager(self, value: ExtensionManager) -> None:
        if value is None:
            raise TypeError("manager cannot be None")
        self._manager = value

    def is_valid(self, file_name: str) -> bool:
        return self._manager.is_valid(file_name)


class FactoryLogAnalyzer(LogAnalyzerBase):
    """Factory injection: the manager is created by an `ExtensionManagerFactory`.

    The manager is created once, at construction time, so an override must be
    installed before the analyzer is built.
    """

    def __init__(
        self,
        web_service: WebService | None = None,
        email_service: EmailService | None = None,
        *,
        factory: ExtensionManagerFactory | None = None,
        **kwargs,
    ) -> None:
        super().__init__(web_service, email_service, **kwargs)
        self._manager = (factory or ExtensionManagerFactory()).create()

    def is_valid(self, file_name: str) -> bool:
        return self._manager.is_valid(file_name)


class FactoryMethodLogAnalyzer(LogAnalyzerBase):
    """Factory method: `get_manager()` is called on every check.

    Subclass and override `get_manager()` to substitute the manager.
    """

    def get_manager(self) -> ExtensionManager:
        """Return the extension manager to consult."""
        return FileExtensionManager()

    def is_valid(self, file_name: str) -> bool:
        return self.get_manager().is_valid(file_name)


class OverridableLogAnalyzer(LogAnalyzerBase):
    """Extract and override: `is_valid()` is the seam itself.

    The default consults a real manager; a subclass may override `is_valid()`
    and never touch a manager at all.
    """

    def __init__(
        self,
        web_service: WebService | None = None,
        email_service: EmailService | None = None,
        **kwargs,
    ) -> None:
        super().__init__(web_service, email_service, **kwargs)
        self._manager = FileExtensionManager()

    def is_valid(self, file_name: str) -> bool:
        return self._manager.is_valid(file_name)


# --- Seam registry ---

AnalyzerBuilder = Callable[..., LogAnalyzerBase]


def _build_constructor(manager: ExtensionManager, **kwargs) -> LogAnalyzerBase:
    return LogAnalyzer(manager, **kwargs)


def _build_property(manager: ExtensionManager, **kwargs) -> LogAnalyzerBase:
    analyzer = PropertyLogAnalyzer(**kwargs)
    analyzer.manager = manager
    return analyzer


def _build_factory(manager: ExtensionManager, **kwargs) -> LogAnalyzerBase:
    return FactoryLogAnalyzer(
        factory=ExtensionManagerFactory(builder=lambda: manager), **kwargs
    )


def _build_factory_method(manager: ExtensionManager, **kwargs) -> LogAnalyzerBase:
    class _ConfiguredFactoryMethodLogAnalyzer(FactoryMethodLogAnalyzer):
        def get_manager(self) -> ExtensionManager:
            return manager

    return _ConfiguredFactoryMethodLogAnalyzer(**kwargs)


def _build_override(manager: ExtensionManager, **kwargs) -> LogAnalyzerBase:
    class _ConfiguredOverridableLogAnalyzer(OverridableLogAnalyzer):
        def is_valid(self, file_name: str) -> bool:
            return manager.is_valid(file_name)

    return _ConfiguredOverridableLogAnalyzer(**kwargs)


SEAMS: dict[str, AnalyzerBuilder] = {
    "constructor": _build_constructor,
    "property": _build_property,
    "factory": _build_factory,
    "factory-method": _build_factory_method,
    "override": _build_override,
}
