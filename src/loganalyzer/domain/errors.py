"""Domain-layer error definitions."""


class LogAnalyzerError(Exception):
    """Base class for analyzer errors."""


class MissingFileNameError(LogAnalyzerError, ValueError):
    """Raised when a file name is None, empty or only whitespace."""

    def __init__(self, file_name: str | None = None) -> None:
        super().__init__(f"filename has to be provided (got {file_name!r})")
        self.file_name = file_name


class ExtensionConfigError(LogAnalyzerError):
    """Raised when an extension manager is configured with no extensions."""

    def __init__(self, source: str) -> None:
        super().__init__(f"No log file extensions configured in {source}.")
        self.source = source
