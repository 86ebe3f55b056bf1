"""
Syntax Tree Printer.

Renders a PHP node sequence as indented, human-readable text for inspection
and debugging. Every node contributes one line, its own `str()`; the printer
never rebuilds that description itself.

Two renderings are offered:

1.  **Flat** (`print_nodes`): one line per root node.
2.  **Expanded** (`print_tree`): each node line is followed by labeled
    sub-sections (`Parameters:`, `Body:`, `Left:`/`Right:`, ...) one indent
    level deeper, with their nodes printed two levels deeper through the same
    printer. `elseif` branches nest one level further than their siblings.

The kind dispatch table covers every kind in `NODE_KINDS`. Nodes of any other
kind are skipped together with their subtree, and print no line. The expanded
rendering works from an explicit stack, so tree depth does not consume
interpreter call stack.
"""

from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple, Union

from phpsniff.config import AnalysisConfig
from phpsniff.core.nodes import (
  Array,
  ArrayAccess,
  ArrayItem,
  Assignment,
  BinaryExpr,
  Class,
  Else,
  ElseIf,
  ExpressionStmt,
  FunctionCall,
  FunctionDecl,
  FunctionDef,
  If,
  InterpolatedString,
  KeyValue,
  MethodCall,
  New,
  PhpNode,
  Return,
  While,
)
from phpsniff.utils.console import default_writer

# (level, label text or node to print at that level)
Entry = Tuple[int, Union[str, PhpNode]]


class Printer:
  """
  Writes syntax tree renderings to a text sink.

  Attributes:
      writer (TextIO): Output destination.
      indent (int): Base indentation level of root nodes.
      indent_unit (str): Text emitted per indentation level.
  """

  # Node kind -> name of the method listing its sub-sections.
  _SECTION_HANDLERS: Dict[str, str] = {
    "Identifier": "_leaf_sections",
    "Variable": "_leaf_sections",
    "StringLiteral": "_leaf_sections",
    "IntegerLiteral": "_leaf_sections",
    "FloatLiteral": "_leaf_sections",
    "BooleanLiteral": "_leaf_sections",
    "NullLiteral": "_leaf_sections",
    "Comment": "_leaf_sections",
    "Property": "_leaf_sections",
    "Parameter": "_leaf_sections",
    "InterpolatedString": "_interpolated_string_sections",
    "Assignment": "_binary_sections",
    "BinaryExpr": "_binary_sections",
    "FunctionCall": "_call_sections",
    "MethodCall": "_call_sections",
    "New": "_call_sections",
    "Array": "_array_sections",
    "ArrayItem": "_key_value_sections",
    "KeyValue": "_key_value_sections",
    "ArrayAccess": "_array_access_sections",
    "FunctionDecl": "_function_sections",
    "FunctionDef": "_function_sections",
    "Return": "_expression_sections",
    "ExpressionStmt": "_expression_sections",
    "If": "_if_sections",
    "ElseIf": "_else_if_sections",
    "Else": "_else_sections",
    "While": "_while_sections",
    "Class": "_class_sections",
  }

  def __init__(self, writer: Optional[TextIO] = None, indent: int = 0, indent_unit: str = "  "):
    """
    Initializes the printer.

    Args:
        writer (Optional[TextIO]): Output sink. Defaults to the active console's file.
        indent (int): Base indentation level.
        indent_unit (str): Text emitted per level.
    """
    self.writer = writer if writer is not None else default_writer()
    self.indent = indent
    self.indent_unit = indent_unit

  def _line(self, level: int, text: str) -> None:
    self.writer.write(f"{self.indent_unit * level}{text}\n")

  def _printable(self, node: Optional[PhpNode]) -> bool:
    return node is not None and node.kind in self._SECTION_HANDLERS

  def print_nodes(self, nodes: Sequence[PhpNode]) -> None:
    """
    Writes one line per node: the node's own description.

    Args:
        nodes (Sequence[PhpNode]): Nodes to print, in order.
    """
    for node in nodes:
      if self._printable(node):
        self._line(self.indent, str(node))

  def print_tree(self, nodes: Sequence[PhpNode]) -> None:
    """
    Writes the expanded rendering of each node and its sub-sections.

    Args:
        nodes (Sequence[PhpNode]): Nodes to print, in order.
    """
    stack: List[Entry] = [(self.indent, n) for n in reversed(nodes) if self._printable(n)]
    while stack:
      level, item = stack.pop()
      if isinstance(item, str):
        self._line(level, item)
        continue

      self._line(level, str(item))
      sections: Callable[[PhpNode, int], List[Entry]] = getattr(self, self._SECTION_HANDLERS[item.kind])
      stack.extend(reversed(sections(item, level)))

  def _section(self, level: int, label: str, nodes: Sequence[Optional[PhpNode]], nest: int = 1) -> List[Entry]:
    """Lists `label:` at `level + nest` and its nodes at `level + nest + 1`; empty sections yield nothing."""
    printable = [n for n in nodes if self._printable(n)]
    if not printable:
      return []
    return [(level + nest, f"{label}:"), *((level + nest + 1, n) for n in printable)]

  # --- Kind handlers ---

  def _leaf_sections(self, node: PhpNode, level: int) -> List[Entry]:
    return []

  def _interpolated_string_sections(self, node: InterpolatedString, level: int) -> List[Entry]:
    return self._section(level, "Parts", node.parts)

  def _binary_sections(self, node: Union[Assignment, BinaryExpr], level: int) -> List[Entry]:
    return self._section(level, "Left", [node.left]) + self._section(level, "Right", [node.right])

  def _call_sections(self, node: Union[FunctionCall, MethodCall, New], level: int) -> List[Entry]:
    return self._section(level, "Arguments", node.args)

  def _array_sections(self, node: Array, level: int) -> List[Entry]:
    return self._section(level, "Elements", node.elements)

  def _key_value_sections(self, node: Union[ArrayItem, KeyValue], level: int) -> List[Entry]:
    return self._section(level, "Key", [node.key]) + self._section(level, "Value", [node.value])

  def _array_access_sections(self, node: ArrayAccess, level: int) -> List[Entry]:
    return self._section(level, "Variable", [node.var]) + self._section(level, "Index", [node.index])

  def _function_sections(self, node: Union[FunctionDecl, FunctionDef], level: int) -> List[Entry]:
    return self._section(level, "Parameters", node.params) + self._section(level, "Body", node.body)

  def _expression_sections(self, node: Union[Return, ExpressionStmt], level: int) -> List[Entry]:
    return self._section(level, "Expression", [node.expr])

  def _if_sections(self, node: If, level: int) -> List[Entry]:
    entries = self._section(level, "Condition", [node.condition]) + self._section(level, "Then", node.body)
    for branch in node.elseifs:
      entries.append((level + 1, "ElseIf:"))
      entries += self._section(level, "Condition", [branch.condition], nest=2)
      entries += self._section(level, "Body", branch.body, nest=2)
    if node.else_ is not None:
      entries.append((level + 1, "Else:"))
      entries += [(level + 2, n) for n in node.else_.body if self._printable(n)]
    return entries

  def _else_if_sections(self, node: ElseIf, level: int) -> List[Entry]:
    return self._section(level, "Condition", [node.condition]) + self._section(level, "Body", node.body)

  def _else_sections(self, node: Else, level: int) -> List[Entry]:
    return self._section(level, "Body", node.body)

  def _while_sections(self, node: While, level: int) -> List[Entry]:
    return self._section(level, "Condition", [node.condition]) + self._section(level, "Body", node.body)

  def _class_sections(self, node: Class, level: int) -> List[Entry]:
    return self._section(level, "Properties", node.properties) + self._section(level, "Methods", node.methods)


def print_ast(
  nodes: Sequence[PhpNode],
  writer: Optional[TextIO] = None,
  indent: int = 0,
  expand: Optional[bool] = None,
  config: Optional[AnalysisConfig] = None,
) -> None:
  """
  Prints a node sequence.

  Args:
      nodes (Sequence[PhpNode]): Nodes to print.
      writer (Optional[TextIO]): Output sink. Defaults to the active console's file.
      indent (int): Base indentation level.
      expand (Optional[bool]): Expanded rendering with sub-sections. Defaults to
          `config.expand_tree`.
      config (Optional[AnalysisConfig]): Indentation unit and rendering default.
          Defaults to `AnalysisConfig()`; pass `AnalysisConfig.load()` to apply
          the `[tool.phpsniff]` table of the project's pyproject.toml.
  """
  config = config or AnalysisConfig()
  printer = Printer(writer, indent=indent, indent_unit=config.indent_unit)
  if config.expand_tree if expand is None else expand:
    printer.print_tree(nodes)
  else:
    printer.print_nodes(nodes)
