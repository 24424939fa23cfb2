"""Substitute collaborators for tests.

Stubs return canned answers and never fail a test on their own. Mocks record
what they were asked to do and expose `assert_*` helpers that raise
`AssertionError`, so a mock can fail a test.
"""

from .doubles import (
    MockEmailService,
    MockWebService,
    StubExtensionManager,
    StubWebService,
)

__all__ = [
    "MockEmailService",
    "MockWebService",
    "StubExtensionManager",
    "StubWebService",
]
