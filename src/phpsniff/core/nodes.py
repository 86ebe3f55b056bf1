"""
PHP Syntax Tree Nodes.

Defines the data structures for the PHP syntax tree consumed by the analysis
core. The tree is built upstream by a parsing front end; everything in this
package only reads it.

Each node:

1.  Carries a `Position` (zero when the builder had none).
2.  Exposes an explicit, possibly empty, ordered list of `children()`.
3.  Owns its one-line textual description via `__str__`, ending in ` @ line:column`.
    Descriptions embed their children's descriptions down to
    `MAX_DESCRIPTION_DEPTH` levels; deeper text is elided as `...`.

`NODE_KINDS` lists every concrete node kind. Consumers that dispatch on
`node.kind` are expected to cover the whole set.
"""

import abc
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type


@dataclass(frozen=True)
class Position:
  """
  Source location of a node.

  Attributes:
      line (int): 1-based line, 0 when unknown.
      column (int): 1-based column, 0 when unknown.
      offset (int): Byte offset from the start of the file.
  """

  line: int = 0
  column: int = 0
  offset: int = 0

  def __str__(self) -> str:
    return f"{self.line}:{self.column}"


class PhpNode(abc.ABC):
  """Abstract base class for all PHP syntax tree nodes."""

  kind: str = "Node"
  pos: Position

  def children(self) -> List["PhpNode"]:
    """
    Returns the child nodes in declaration order.

    Returns:
        List[PhpNode]: Direct children. Empty for leaves.
    """
    return []

  def token_literal(self) -> str:
    """Returns the literal source token this node was built from."""
    return ""

  @abc.abstractmethod
  def __str__(self) -> str:
    """Returns the one-line description of the node, including its position."""
    pass

  def _at(self, text: str) -> str:
    return f"{text} @ {self.pos}"


MAX_DESCRIPTION_DEPTH = 16
"""Nesting depth past which embedded child descriptions are elided as `...`."""

_description_depth: ContextVar[int] = ContextVar("description_depth", default=0)


def _nested(node: PhpNode) -> str:
  """
  Describes a child embedded in its parent's one-line description.

  Args:
      node (PhpNode): The embedded child.

  Returns:
      str: `str(node)`, or `...` once `MAX_DESCRIPTION_DEPTH` levels are open.
  """
  depth = _description_depth.get()
  if depth >= MAX_DESCRIPTION_DEPTH:
    return "..."
  token = _description_depth.set(depth + 1)
  try:
    return str(node)
  finally:
    _description_depth.reset(token)


# --- Names & Literals ---


@dataclass
class Identifier(PhpNode):
  """A bare name such as a constant or class reference."""

  name: str
  pos: Position = field(default_factory=Position)
  kind = "Identifier"

  def __str__(self) -> str:
    return self._at(f"Identifier({self.name})")

  def token_literal(self) -> str:
    return self.name


@dataclass
class Variable(PhpNode):
  """
  A PHP variable reference.

  Attributes:
      name (str): Variable name without the leading `$`.
  """

  name: str
  pos: Position = field(default_factory=Position)
  kind = "Variable"

  def __str__(self) -> str:
    return self._at(f"Variable(${self.name})")

  def token_literal(self) -> str:
    return self.name


@dataclass
class StringLiteral(PhpNode):
  """A plain (non-interpolated) string literal."""

  value: str
  pos: Position = field(default_factory=Position)
  kind = "StringLiteral"

  def __str__(self) -> str:
    return self._at(f'"{self.value}"')

  def token_literal(self) -> str:
    return self.value


@dataclass
class IntegerLiteral(PhpNode):
  value: int
  pos: Position = field(default_factory=Position)
  kind = "IntegerLiteral"

  def __str__(self) -> str:
    return self._at(f"Integer({self.value})")

  def token_literal(self) -> str:
    return str(self.value)


@dataclass
class FloatLiteral(PhpNode):
  value: float
  pos: Position = field(default_factory=Position)
  kind = "FloatLiteral"

  def __str__(self) -> str:
    return self._at(f"Float({self.value:g})")

  def token_literal(self) -> str:
    return f"{self.value:g}"


@dataclass
class BooleanLiteral(PhpNode):
  value: bool
  pos: Position = field(default_factory=Position)
  kind = "BooleanLiteral"

  def __str__(self) -> str:
    return self._at(f"Boolean({self.token_literal()})")

  def token_literal(self) -> str:
    return "true" if self.value else "false"


@dataclass
class NullLiteral(PhpNode):
  pos: Position = field(default_factory=Position)
  kind = "NullLiteral"

  def __str__(self) -> str:
    return self._at("Null")

  def token_literal(self) -> str:
    return "null"


@dataclass
class InterpolatedString(PhpNode):
  """
  A double-quoted string with embedded expressions (e.g. `"Hello $name"`).

  Attributes:
      parts (List[PhpNode]): Literal fragments and embedded expressions, in order.
  """

  parts: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "InterpolatedString"

  def children(self) -> List[PhpNode]:
    return list(self.parts)

  def __str__(self) -> str:
    return self._at("InterpolatedString")

  def token_literal(self) -> str:
    return "".join(p.token_literal() for p in self.parts)


@dataclass
class Comment(PhpNode):
  value: str
  pos: Position = field(default_factory=Position)
  kind = "Comment"

  def __str__(self) -> str:
    return self._at(f"Comment({self.value})")

  def token_literal(self) -> str:
    return self.value


# --- Expressions ---


@dataclass
class Assignment(PhpNode):
  left: PhpNode
  right: PhpNode
  pos: Position = field(default_factory=Position)
  kind = "Assignment"

  def children(self) -> List[PhpNode]:
    return [self.left, self.right]

  def __str__(self) -> str:
    return self._at(f"Assignment({_nested(self.left)} = {_nested(self.right)})")

  def token_literal(self) -> str:
    return "="


@dataclass
class BinaryExpr(PhpNode):
  left: PhpNode
  operator: str
  right: PhpNode
  pos: Position = field(default_factory=Position)
  kind = "BinaryExpr"

  def children(self) -> List[PhpNode]:
    return [self.left, self.right]

  def __str__(self) -> str:
    return self._at(f"BinaryExpr({_nested(self.left)} {self.operator} {_nested(self.right)})")

  def token_literal(self) -> str:
    return self.operator


@dataclass
class FunctionCall(PhpNode):
  """
  A call to a named function, e.g. `strlen($s)`.

  Method calls are modelled separately by `MethodCall`.
  """

  name: str
  args: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "FunctionCall"

  def children(self) -> List[PhpNode]:
    return list(self.args)

  def __str__(self) -> str:
    return self._at(f"FunctionCall({self.name})")

  def token_literal(self) -> str:
    return self.name


@dataclass
class MethodCall(PhpNode):
  """A call on an object, e.g. `$user->save()`."""

  obj: PhpNode
  method: str
  args: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "MethodCall"

  def children(self) -> List[PhpNode]:
    return [self.obj, *self.args]

  def __str__(self) -> str:
    return self._at(f"MethodCall({self.method})")

  def token_literal(self) -> str:
    return self.method


@dataclass
class New(PhpNode):
  class_name: str
  args: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "New"

  def children(self) -> List[PhpNode]:
    return list(self.args)

  def __str__(self) -> str:
    return self._at(f"New({self.class_name})")

  def token_literal(self) -> str:
    return "new"


# --- Arrays ---


@dataclass
class Array(PhpNode):
  """
  An array literal.

  Attributes:
      elements (List[PhpNode]): Items in declaration order (usually `ArrayItem`).
      long_syntax (bool): True for the keyword form `array(...)`, False for `[...]`.
  """

  elements: List[PhpNode] = field(default_factory=list)
  long_syntax: bool = False
  pos: Position = field(default_factory=Position)
  kind = "Array"

  def children(self) -> List[PhpNode]:
    return list(self.elements)

  def __str__(self) -> str:
    return self._at(f"Array({', '.join(_nested(e) for e in self.elements)})")

  def token_literal(self) -> str:
    return "array" if self.long_syntax else "["


@dataclass
class ArrayItem(PhpNode):
  """
  One entry of an array literal.

  Attributes:
      value (PhpNode): The item value.
      key (Optional[PhpNode]): Key for associative entries.
      by_ref (bool): `&$value` entries.
      unpack (bool): Spread entries (`...$other`).
  """

  value: PhpNode
  key: Optional[PhpNode] = None
  by_ref: bool = False
  unpack: bool = False
  pos: Position = field(default_factory=Position)
  kind = "ArrayItem"

  def children(self) -> List[PhpNode]:
    if self.key is not None:
      return [self.key, self.value]
    return [self.value]

  def __str__(self) -> str:
    prefix = ("&" if self.by_ref else "") + ("..." if self.unpack else "")
    if self.key is not None:
      return self._at(f"ArrayItem({prefix}{self.key.token_literal()} => {self.value.token_literal()})")
    return self._at(f"ArrayItem({prefix}{self.value.token_literal()})")

  def token_literal(self) -> str:
    return "=>" if self.key is not None else ""


@dataclass
class KeyValue(PhpNode):
  value: PhpNode
  key: Optional[PhpNode] = None
  pos: Position = field(default_factory=Position)
  kind = "KeyValue"

  def children(self) -> List[PhpNode]:
    if self.key is not None:
      return [self.key, self.value]
    return [self.value]

  def __str__(self) -> str:
    if self.key is None:
      return _nested(self.value)
    return f"{_nested(self.key)} => {_nested(self.value)}"

  def token_literal(self) -> str:
    return "=>"


@dataclass
class ArrayAccess(PhpNode):
  """Index access such as `$config['toolbar']`; `index` is None for `$list[]`."""

  var: PhpNode
  index: Optional[PhpNode] = None
  pos: Position = field(default_factory=Position)
  kind = "ArrayAccess"

  def children(self) -> List[PhpNode]:
    if self.index is not None:
      return [self.var, self.index]
    return [self.var]

  def __str__(self) -> str:
    index = "" if self.index is None else _nested(self.index)
    return self._at(f"ArrayAccess({_nested(self.var)}[{index}])")

  def token_literal(self) -> str:
    return "["


# --- Functions ---


@dataclass
class Parameter(PhpNode):
  name: str
  type_hint: str = ""
  default: Optional[PhpNode] = None
  pos: Position = field(default_factory=Position)
  kind = "Parameter"

  def children(self) -> List[PhpNode]:
    return [self.default] if self.default is not None else []

  def __str__(self) -> str:
    parts = []
    if self.type_hint:
      parts.append(self.type_hint)
    parts.append(f"${self.name}")
    if self.default is not None:
      parts.extend(["=", _nested(self.default)])
    return self._at(" ".join(parts))

  def token_literal(self) -> str:
    return self.name


@dataclass
class FunctionDecl(PhpNode):
  """
  A free-standing `function name(...) { ... }` declaration.

  This is the node the symbol resolution pass registers as a declared routine.
  """

  name: str
  params: List[PhpNode] = field(default_factory=list)
  body: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "FunctionDecl"

  def children(self) -> List[PhpNode]:
    return [*self.params, *self.body]

  def __str__(self) -> str:
    return self._at(f"Function({self.name})")

  def token_literal(self) -> str:
    return "function"


@dataclass
class FunctionDef(PhpNode):
  """
  A function definition carrying signature details, used for class methods.

  Attributes:
      name (str): Function or method name.
      visibility (str): `public`, `protected`, `private` or empty.
      modifiers (List[str]): Extra modifiers such as `static`, `final`, `abstract`.
      return_type (str): Declared return type, empty when absent.
      params (List[PhpNode]): `Parameter` nodes.
      body (List[PhpNode]): Statements.
  """

  name: str
  visibility: str = ""
  modifiers: List[str] = field(default_factory=list)
  return_type: str = ""
  params: List[PhpNode] = field(default_factory=list)
  body: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "FunctionDef"

  def children(self) -> List[PhpNode]:
    return [*self.params, *self.body]

  def __str__(self) -> str:
    parts = []
    if self.modifiers:
      parts.append(" ".join(self.modifiers))
    if self.visibility:
      parts.append(self.visibility)
    parts.append(f"Function({self.name})")
    if self.return_type:
      parts.append(f": {self.return_type}")
    return self._at(" ".join(parts))

  def token_literal(self) -> str:
    return "function"


# --- Statements ---


@dataclass
class Return(PhpNode):
  expr: Optional[PhpNode] = None
  pos: Position = field(default_factory=Position)
  kind = "Return"

  def children(self) -> List[PhpNode]:
    return [self.expr] if self.expr is not None else []

  def __str__(self) -> str:
    expr = "" if self.expr is None else _nested(self.expr)
    return self._at(f"Return({expr})")

  def token_literal(self) -> str:
    return "return"


@dataclass
class ExpressionStmt(PhpNode):
  """A single expression used as a statement, e.g. `foo();`."""

  expr: PhpNode
  pos: Position = field(default_factory=Position)
  kind = "ExpressionStmt"

  def children(self) -> List[PhpNode]:
    return [self.expr]

  def __str__(self) -> str:
    return self._at(f"ExpressionStmt({_nested(self.expr)})")

  def token_literal(self) -> str:
    return self.expr.token_literal()


@dataclass
class ElseIf(PhpNode):
  condition: PhpNode
  body: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "ElseIf"

  def children(self) -> List[PhpNode]:
    return [self.condition, *self.body]

  def __str__(self) -> str:
    return self._at(f"ElseIf(Cond: {_nested(self.condition)})")

  def token_literal(self) -> str:
    return "elseif"


@dataclass
class Else(PhpNode):
  body: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "Else"

  def children(self) -> List[PhpNode]:
    return list(self.body)

  def __str__(self) -> str:
    return self._at("Else")

  def token_literal(self) -> str:
    return "else"


@dataclass
class If(PhpNode):
  """
  An `if` statement with optional `elseif` and `else` branches.

  Children order: condition, then-body, elseif branches, else branch.
  """

  condition: PhpNode
  body: List[PhpNode] = field(default_factory=list)
  elseifs: List[ElseIf] = field(default_factory=list)
  else_: Optional[Else] = None
  pos: Position = field(default_factory=Position)
  kind = "If"

  def children(self) -> List[PhpNode]:
    nodes: List[PhpNode] = [self.condition, *self.body, *self.elseifs]
    if self.else_ is not None:
      nodes.append(self.else_)
    return nodes

  def __str__(self) -> str:
    return self._at(f"If(Cond: {_nested(self.condition)})")

  def token_literal(self) -> str:
    return "if"


@dataclass
class While(PhpNode):
  condition: PhpNode
  body: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "While"

  def children(self) -> List[PhpNode]:
    return [self.condition, *self.body]

  def __str__(self) -> str:
    return self._at(f"While(Cond: {_nested(self.condition)})")

  def token_literal(self) -> str:
    return "while"


# --- Classes ---


@dataclass
class Property(PhpNode):
  name: str
  visibility: str = ""
  pos: Position = field(default_factory=Position)
  kind = "Property"

  def __str__(self) -> str:
    parts = [self.visibility] if self.visibility else []
    parts.append(f"Property(${self.name})")
    return self._at(" ".join(parts))

  def token_literal(self) -> str:
    return self.name


@dataclass
class Class(PhpNode):
  """
  A class declaration.

  Attributes:
      name (str): Class name.
      extends (str): Parent class, empty when absent.
      implements (List[str]): Implemented interfaces.
      properties (List[PhpNode]): `Property` nodes.
      methods (List[PhpNode]): `FunctionDef` nodes.
  """

  name: str
  extends: str = ""
  implements: List[str] = field(default_factory=list)
  properties: List[PhpNode] = field(default_factory=list)
  methods: List[PhpNode] = field(default_factory=list)
  pos: Position = field(default_factory=Position)
  kind = "Class"

  def children(self) -> List[PhpNode]:
    return [*self.properties, *self.methods]

  def __str__(self) -> str:
    parts = [f"Class({self.name})"]
    if self.extends:
      parts.append(f"extends {self.extends}")
    if self.implements:
      parts.append(f"implements {', '.join(self.implements)}")
    return self._at(" ".join(parts))

  def token_literal(self) -> str:
    return "class"


NODE_TYPES: Dict[str, Type[PhpNode]] = {
  cls.kind: cls
  for cls in (
    Identifier,
    Variable,
    StringLiteral,
    IntegerLiteral,
    FloatLiteral,
    BooleanLiteral,
    NullLiteral,
    InterpolatedString,
    Comment,
    Assignment,
    BinaryExpr,
    FunctionCall,
    MethodCall,
    New,
    Array,
    ArrayItem,
    KeyValue,
    ArrayAccess,
    Parameter,
    FunctionDecl,
    FunctionDef,
    Return,
    ExpressionStmt,
    If,
    ElseIf,
    Else,
    While,
    Property,
    Class,
  )
}
"""Maps every concrete node kind to its class."""

NODE_KINDS = frozenset(NODE_TYPES)
