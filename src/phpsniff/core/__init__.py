"""
Syntax Tree Core Package.

Contains the PHP node model and the generic traversal engine every analysis
pass, sniff and printer is built on.
"""

from phpsniff.core.nodes import (
  NODE_KINDS,
  NODE_TYPES,
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
  NullLiteral,
  Parameter,
  PhpNode,
  Position,
  Property,
  Return,
  StringLiteral,
  Variable,
  While,
)
from phpsniff.core.traversal import NodeVisitor, traverse, walk

__all__ = [
  "NODE_KINDS",
  "NODE_TYPES",
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
  "NullLiteral",
  "Parameter",
  "PhpNode",
  "Position",
  "Property",
  "Return",
  "StringLiteral",
  "Variable",
  "While",
  "NodeVisitor",
  "traverse",
  "walk",
]
