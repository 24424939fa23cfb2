"""Entrypoints (inbound adapters) for LOGANALYZER.

Expose the analyzers to the outside world through the command line. Parse
and validate inputs, call `loganalyzer.bootstrap`, and present results.

Dependency rule: import `loganalyzer.bootstrap`; avoid importing
`loganalyzer.adapters` directly.
"""
