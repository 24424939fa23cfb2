"""Fixtures for end-to-end CLI tests.

Every test runs in an isolated filesystem with a clean LOGANALYZER_*
environment, and the root logger is restored afterwards because the CLI
reconfigures it.
"""

import logging

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name,unused-argument


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner, clean_env):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
