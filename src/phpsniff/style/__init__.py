"""
Style Checking Package.

Defines the sniff contract, the issue model and the bundled sniffs.

Modules:
    - ``issue``: The `StyleIssue` record.
    - ``sniff``: `Sniff` and the traversal-driven `NodeSniff` base classes.
    - ``generic``: Standard-independent rules (long array syntax, assignment in condition).
    - ``psr1``: PSR-1 naming rules.
"""

from phpsniff.style.issue import StyleIssue
from phpsniff.style.sniff import NodeSniff, Sniff
from phpsniff.style.generic import AssignmentInConditionSniff, DisallowLongArraySyntaxSniff
from phpsniff.style.psr1 import ClassNameSniff, MethodCamelCaseSniff

__all__ = [
  "StyleIssue",
  "Sniff",
  "NodeSniff",
  "AssignmentInConditionSniff",
  "DisallowLongArraySyntaxSniff",
  "ClassNameSniff",
  "MethodCamelCaseSniff",
]
