"""Bootstrap (composition root) for LOGANALYZER.

Assembles an analyzer at runtime: reads configuration, builds the real
extension manager and error sinks, and hands them to the seam the caller
picked.

Import rules:
- Entry points import *this* package (not adapters/service_layer directly).
- Inner layers must not import `loganalyzer.bootstrap`.
"""
