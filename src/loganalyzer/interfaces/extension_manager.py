"""Interface for extension managers."""

import abc

# pylint: disable=too-few-public-methods


class ExtensionManager(abc.ABC):
    """Contract for deciding whether a file name is a supported log file."""

    @abc.abstractmethod
    def is_valid(self, file_name: str) -> bool:
        """Return True if `file_name` names a supported log file.

        Args:
            file_name: A non-empty file name (no validation is expected here;
                callers run the domain checks first).
        """
