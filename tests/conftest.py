"""Global pytest fixtures for LOGANALYZER."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest import mock

import pytest

from loganalyzer.service_layer.factory import ExtensionManagerFactory


@pytest.fixture(autouse=True)
def reset_extension_manager_factory() -> Iterator[None]:
    """Clear the factory's process-wide override around every test."""
    ExtensionManagerFactory.reset()
    yield
    ExtensionManagerFactory.reset()


@pytest.fixture
def clean_env() -> Iterator[None]:
    """Remove every LOGANALYZER_* variable for the duration of a test."""
    with mock.patch.dict(os.environ):
        for key in [k for k in os.environ if k.startswith("LOGANALYZER_")]:
            del os.environ[key]
        yield
