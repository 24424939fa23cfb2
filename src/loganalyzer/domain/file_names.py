"""Rules for log file names."""

from collections.abc import Iterable

from loganalyzer.domain.errors import ExtensionConfigError, MissingFileNameError

DEFAULT_MIN_NAME_LENGTH = 8
DEFAULT_EXTENSIONS = (".slf",)


def ensure_file_name(file_name: str | None) -> str:
    """Return `file_name` stripped of surrounding whitespace.

    Raises:
        MissingFileNameError: If the name is None, empty or whitespace-only.
    """
    if file_name is None or not file_name.strip():
        raise MissingFileNameError(file_name)
    return file_name.strip()


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and give it a leading dot ("SLF" -> ".slf")."""
    ext = extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


def normalize_extensions(extensions: Iterable[str], source: str) -> frozenset[str]:
    """Normalize a collection of extensions, dropping blanks.

    Args:
        extensions: Raw extension strings, with or without a leading dot.
        source: Where the extensions came from; used in the error message.

    Raises:
        ExtensionConfigError: If nothing is left after normalization.
    """
    normalized = frozenset(
        ext for ext in map(normalize_extension, extensions) if ext not in ("", ".")
    )
    if not normalized:
        raise ExtensionConfigError(source)
    return normalized


def has_extension(file_name: str, extensions: Iterable[str]) -> bool:
    """Case-insensitive check that `file_name` ends with one of `extensions`.

    Blank extensions and bare dots never match.
    """
    lowered = file_name.lower()
    return any(
        lowered.endswith(ext)
        for ext in map(normalize_extension, extensions)
        if ext not in ("", ".")
    )


def is_too_short(file_name: str, min_length: int = DEFAULT_MIN_NAME_LENGTH) -> bool:
    """Return True if the name (as given, extension included) is too short."""
    return len(file_name) < min_length
