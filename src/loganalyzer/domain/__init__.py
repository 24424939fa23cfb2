"""Domain layer for LOGANALYZER.

Pure rules about log file names: what counts as a missing name, how an
extension is matched, and when a name is too short. No I/O and no logging
configuration lives here.

Dependency rule: must not import `loganalyzer.adapters`,
`loganalyzer.service_layer` or `loganalyzer.entrypoints`.
"""
