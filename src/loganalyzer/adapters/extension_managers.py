"""Extension managers for LOGANALYZER."""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from loganalyzer.domain.file_names import (
    DEFAULT_EXTENSIONS,
    has_extension,
    normalize_extensions,
)
from loganalyzer.interfaces.extension_manager import ExtensionManager

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)


class FileExtensionManager(ExtensionManager):
    """Accepts file names ending in one of a fixed set of extensions.

    Matching is case-insensitive and extensions may be given with or
    without their leading dot.
    """

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self._extensions = normalize_extensions(extensions, source="arguments")

    @property
    def extensions(self) -> frozenset[str]:
        """The normalized extensions this manager accepts."""
        return self._extensions

    def is_valid(self, file_name: str) -> bool:
        valid = has_extension(file_name, self._extensions)
        logger.debug("Extension check %r -> %s", file_name, valid)
        return valid


class ConfigFileExtensionManager(ExtensionManager):
    """Reads the accepted extensions from a text file on first use.

    The file lists one extension per line. Blank lines and anything after a
    `#` are ignored. The file is read once and cached (thread-safe).
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._delegate: FileExtensionManager | None = None

    @property
    def path(self) -> Path:
        """Path of the extensions file."""
        return self._path

    def _load(self) -> FileExtensionManager:
        with self._lock:
            if self._delegate is None:
                logger.debug("Loading extensions from %s", self._path)
                lines = self._path.read_text(encoding="utf-8").splitlines()
                extensions = normalize_extensions(
                    (line.split("#", 1)[0] for line in lines), source=str(self._path)
                )
                self._delegate = FileExtensionManager(extensions)
            return self._delegate

    def is_valid(self, file_name: str) -> bool:
        """Check `file_name` against the file's extensions.

        Raises:
            FileNotFoundError: If the extensions file does not exist.
            ExtensionConfigError: If the file lists no extensions.
        """
        return self._load().is_valid(file_name)
