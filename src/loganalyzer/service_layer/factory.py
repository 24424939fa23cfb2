"""Factory for extension managers.

`ExtensionManagerFactory` centralizes how the analyzers obtain a real
extension manager. Tests substitute the created instance in one of two
ways. They can install a process-wide override with `set_manager()` (or the
`override()` context manager) and clear it with `reset()`. Or they can pass
a factory instance built around their own `builder` to the analyzer.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import ClassVar

from loganalyzer import config
from loganalyzer.adapters.extension_managers import (
    ConfigFileExtensionManager,
    FileExtensionManager,
)
from loganalyzer.interfaces.extension_manager import ExtensionManager

logger = logging.getLogger(__name__)

ManagerBuilder = Callable[[], ExtensionManager]


def build_configured_manager(settings: config.Settings | None = None) -> ExtensionManager:
    """Build the real extension manager described by `settings`.

    Args:
        settings: Resolved settings; loaded from the environment when None.

    Returns:
        A `ConfigFileExtensionManager` if an extensions file is configured,
        otherwise a `FileExtensionManager` over the configured extensions.
    """
    settings = settings or config.load_settings()
    if settings.extensions_file is not None:
        return ConfigFileExtensionManager(settings.extensions_file)
    return FileExtensionManager(settings.extensions)


class ExtensionManagerFactory:
    """Creates extension managers, honouring a process-wide override.

    The override slot is shared by every instance (it is a class attribute),
    so a test that sets it must reset it; `override()` does that for you.
    """

    _custom_manager: ClassVar[ExtensionManager | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, builder: ManagerBuilder = build_configured_manager) -> None:
        self._builder = builder

    def create(self) -> ExtensionManager:
        """Return the override if one is installed, else a freshly built manager."""
        with self._lock:
            custom = type(self)._custom_manager
        if custom is not None:
            logger.debug("Factory returning override %r", custom)
            return custom
        return self._builder()

    @classmethod
    def set_manager(cls, manager: ExtensionManager | None) -> None:
        """Install (or, with None, clear) the process-wide override."""
        with cls._lock:
            cls._custom_manager = manager

    @classmethod
    def reset(cls) -> None:
        """Clear the process-wide override."""
        cls.set_manager(None)

    @classmethod
    def has_override(cls) -> bool:
        """Return True if an override is currently installed."""
        with cls._lock:
            return cls._custom_manager is not None

    @classmethod
    @contextmanager
    def override(cls, manager: ExtensionManager) -> Iterator[ExtensionManager]:
        """Install `manager` for the duration of a `with` block.

        The previous override (or none) is restored on exit, even if the
        block raises, so overrides nest.
        """
        with cls._lock:
            previous = cls._custom_manager
        cls.set_manager(manager)
        try:
            yield manager
        finally:
            cls.set_manager(previous)
