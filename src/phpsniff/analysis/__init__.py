"""
Static Analysis Package.

This package contains whole-tree passes that inspect a PHP syntax tree and
report semantic problems.

Modules:
    - ``builtins``: Registry of function names that are always defined.
    - ``symbols``: Two-pass detection of calls to undeclared functions.
"""

from phpsniff.analysis.builtins import DEFAULT_BUILTINS, BuiltinRegistry
from phpsniff.analysis.symbols import (
  DeclaredSymbolSet,
  UnknownFunctionCall,
  analyze_unknown_function_calls,
  collect_declared_functions,
  find_unknown_function_calls,
)

__all__ = [
  "DEFAULT_BUILTINS",
  "BuiltinRegistry",
  "DeclaredSymbolSet",
  "UnknownFunctionCall",
  "analyze_unknown_function_calls",
  "collect_declared_functions",
  "find_unknown_function_calls",
]
