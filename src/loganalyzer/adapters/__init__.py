"""Adapters (infrastructure) for LOGANALYZER.

Provide the real implementations of the collaborator interfaces: extension
managers backed by configuration, and error sinks backed by `logging` or a
JSON-lines file.

Dependency rule: may import `loganalyzer.domain` and
`loganalyzer.interfaces`; the domain must not import this package.
"""
