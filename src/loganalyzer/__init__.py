"""LOGANALYZER

A small log-file name analyzer built to show unit-testing isolation
techniques: five dependency-injection seams, plus stub, mock and fake
collaborators that can be substituted at each of them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
