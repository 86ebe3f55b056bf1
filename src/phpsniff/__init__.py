"""
phpsniff Package.

The analysis core of a PHP source-style checker. Given a syntax tree built by
a parsing front end, it walks the tree, reports calls to undeclared functions,
runs pluggable style rules ("sniffs") and renders the tree as readable text.

Usage
-----

Unknown Function Calls
^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import io
    from phpsniff import FunctionCall, Position, analyze_unknown_function_calls

    nodes = [FunctionCall("render", pos=Position(3, 1))]
    out = io.StringIO()
    analyze_unknown_function_calls(nodes, writer=out)
    print(out.getvalue())
    # Unknown function: render at line 3

Running a Sniff
^^^^^^^^^^^^^^^

.. code-block:: python

    from phpsniff import Array, DisallowLongArraySyntaxSniff

    sniff = DisallowLongArraySyntaxSniff()
    sniff.check([Array(long_syntax=True)], "index.php")
    for issue in sniff.issues:
        print(issue.location, issue.code)
"""

from phpsniff.analysis import BuiltinRegistry, analyze_unknown_function_calls
from phpsniff.config import AnalysisConfig
from phpsniff.core import (
  NODE_KINDS,
  Array,
  ArrayAccess,
  ArrayItem,
  Assignment,
  BinaryExpr,
  BooleanLiteral,
  Class,
  Comment,
  Else,
  ElseIf,
  ExpressionStmt,
  FloatLiteral,
  FunctionCall,
  FunctionDecl,
  FunctionDef,
  Identifier,
  If,
  IntegerLiteral,
  InterpolatedString,
  KeyValue,
  MethodCall,
  New,
  NodeVisitor,
  NullLiteral,
  Parameter,
  PhpNode,
  Position,
  Property,
  Return,
  StringLiteral,
  Variable,
  While,
  traverse,
  walk,
)
from phpsniff.enums import Severity
from phpsniff.style import (
  AssignmentInConditionSniff,
  ClassNameSniff,
  DisallowLongArraySyntaxSniff,
  MethodCamelCaseSniff,
  NodeSniff,
  Sniff,
  StyleIssue,
)
from phpsniff.utils.printer import Printer, print_ast

__version__ = "0.0.1"

__all__ = [
  "NODE_KINDS",
  "Array",
  "ArrayAccess",
  "ArrayItem",
  "Assignment",
  "BinaryExpr",
  "BooleanLiteral",
  "Class",
  "Comment",
  "Else",
  "ElseIf",
  "ExpressionStmt",
  "FloatLiteral",
  "FunctionCall",
  "FunctionDecl",
  "FunctionDef",
  "Identifier",
  "If",
  "IntegerLiteral",
  "InterpolatedString",
  "KeyValue",
  "MethodCall",
  "New",
  "NodeVisitor",
  "NullLiteral",
  "Parameter",
  "PhpNode",
  "Position",
  "Property",
  "Return",
  "StringLiteral",
  "Variable",
  "While",
  "traverse",
  "walk",
  "AnalysisConfig",
  "BuiltinRegistry",
  "analyze_unknown_function_calls",
  "Severity",
  "Sniff",
  "NodeSniff",
  "StyleIssue",
  "AssignmentInConditionSniff",
  "DisallowLongArraySyntaxSniff",
  "ClassNameSniff",
  "MethodCamelCaseSniff",
  "Printer",
  "print_ast",
]
