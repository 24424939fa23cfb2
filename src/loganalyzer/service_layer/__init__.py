"""Service layer for LOGANALYZER.

Implements the analyzer use-cases (validating and analyzing log file names)
once per dependency-injection seam, plus the extension-manager factory.

Dependency rule: may import `loganalyzer.domain` and
`loganalyzer.interfaces`. The real adapters are only reached through the
factory and the default constructors; never import `loganalyzer.entrypoints`.
"""
