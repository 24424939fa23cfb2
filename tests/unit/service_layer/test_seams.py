"""Every seam in the registry honours a substituted manager."""

import pytest

from loganalyzer.service_layer.analyzers import SEAMS, LogAnalyzerBase
from loganalyzer.testing import MockWebService, StubExtensionManager

# pylint: disable=magic-value-comparison


def test_registry_names():
    """The five seams are registered under stable names."""
    assert list(SEAMS) == [
        "constructor",
        "property",
        "factory",
        "factory-method",
        "override",
    ]


@pytest.mark.parametrize("seam", list(SEAMS))
@pytest.mark.parametrize("answer", [True, False])
def test_seam_uses_the_given_manager(seam, answer):
    """The stub's answer comes back through every seam."""
    stub = StubExtensionManager(will_be_valid=answer)
    analyzer = SEAMS[seam](stub)

    assert isinstance(analyzer, LogAnalyzerBase)
    assert analyzer.is_valid_log_file_name("server.txt") is answer
    assert stub.calls == 1


@pytest.mark.parametrize("seam", list(SEAMS))
def test_seam_passes_collaborators_and_options(seam):
    """Web service and minimum length reach the analyzer through every seam."""
    web = MockWebService()
    analyzer = SEAMS[seam](StubExtensionManager(), web_service=web, min_name_length=3)

    analyzer.analyze("abc")
    web.assert_not_called()
    analyzer.analyze("ab")
    web.assert_logged("Filename too short: ab")
