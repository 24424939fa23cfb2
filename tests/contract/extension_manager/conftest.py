"""Fixtures for ExtensionManager contract tests."""

from collections.abc import Iterable
from pathlib import Path

import pytest

from loganalyzer.adapters.extension_managers import (
    ConfigFileExtensionManager,
    FileExtensionManager,
)
from loganalyzer.interfaces.extension_manager import ExtensionManager
from loganalyzer.testing import StubExtensionManager


def _make_real(kind: str, tmp_path: Path) -> ExtensionManager:
    match kind:
        case "memory":
            return FileExtensionManager([".slf"])
        case "file":
            path = tmp_path / "extensions.txt"
            path.write_text("# log files\nSLF\n", encoding="utf-8")
            return ConfigFileExtensionManager(path)
        case _:
            raise ValueError(f"unknown extension manager type: {kind}")


@pytest.fixture(params=["memory", "file"])
def real_extension_manager(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Iterable[ExtensionManager]:
    """Yield a real manager configured to accept `.slf` only.

    Supported params:
      - `"memory"` → FileExtensionManager
      - `"file"` → ConfigFileExtensionManager over a temporary file
    """
    yield _make_real(request.param, tmp_path)


@pytest.fixture(params=["memory", "file", "stub-valid", "stub-invalid"])
def extension_manager(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Iterable[ExtensionManager]:
    """Yield every ExtensionManager, stubs included."""
    match request.param:
        case "stub-valid":
            yield StubExtensionManager(will_be_valid=True)
        case "stub-invalid":
            yield StubExtensionManager(will_be_valid=False)
        case kind:
            yield _make_real(kind, tmp_path)
