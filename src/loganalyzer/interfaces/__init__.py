"""Interfaces (collaborator boundary) for LOGANALYZER.

Defines framework-free contracts: ABCs and small DTOs shared by the service
layer, the adapters and the test doubles. Business rules stay out of this
package.

Dependency rule: this package is independent; do not import from any
`loganalyzer.*` modules. It may be imported by `loganalyzer.service_layer`,
`loganalyzer.adapters`, `loganalyzer.testing` and `loganalyzer.bootstrap`.
"""
