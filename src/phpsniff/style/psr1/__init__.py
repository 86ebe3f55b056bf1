"""
PSR-1 Basic Coding Standard sniffs.
"""

from phpsniff.style.psr1.naming import ClassNameSniff, MethodCamelCaseSniff

__all__ = ["ClassNameSniff", "MethodCamelCaseSniff"]
