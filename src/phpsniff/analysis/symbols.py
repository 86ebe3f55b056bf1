"""
Unknown Function Call Analysis.

This module provides a two-pass static analysis over a whole PHP syntax tree:

1.  **Collection**: `DeclaredFunctionCollector` records the name of every
    `FunctionDecl`, at any nesting depth and regardless of reachability.
2.  **Lookup**: `UnknownCallFinder` reports every `FunctionCall` whose name is
    neither declared nor a registered builtin.

Scoping is flat: one `DeclaredSymbolSet` covers the whole tree. Method calls
are `MethodCall` nodes and are not checked.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, TextIO

from rich.markup import escape

from phpsniff.analysis.builtins import BuiltinRegistry
from phpsniff.config import AnalysisConfig
from phpsniff.core.nodes import FunctionCall, FunctionDecl, PhpNode
from phpsniff.core.traversal import NodeVisitor, traverse
from phpsniff.utils.console import default_writer, log_debug

UNKNOWN_FUNCTION_FORMAT = "Unknown function: {name} at line {line}"


class DeclaredSymbolSet:
  """
  Function names declared anywhere in one tree.
  """

  def __init__(self, case_sensitive: bool = True):
    """
    Initializes an empty set.

    Args:
        case_sensitive: If False, names are compared case-insensitively.
    """
    self.case_sensitive = case_sensitive
    self._names: Set[str] = set()

  def _normalize(self, name: str) -> str:
    return name if self.case_sensitive else name.lower()

  def add(self, name: str) -> None:
    self._names.add(self._normalize(name))

  def __contains__(self, name: object) -> bool:
    if not isinstance(name, str):
      return False
    return self._normalize(name) in self._names

  def __iter__(self) -> Iterator[str]:
    return iter(sorted(self._names))

  def __len__(self) -> int:
    return len(self._names)


@dataclass(frozen=True)
class UnknownFunctionCall:
  """
  A call-site referencing an undeclared, non-builtin function.

  Attributes:
      name (str): Called function name as written.
      line (int): Source line, 0 when the call has no position.
      column (int): Source column, 0 when unknown.
  """

  name: str
  line: int
  column: int = 0

  def __str__(self) -> str:
    return UNKNOWN_FUNCTION_FORMAT.format(name=self.name, line=self.line)


class DeclaredFunctionCollector(NodeVisitor):
  """
  Collection pass: registers every `FunctionDecl` name.
  """

  def __init__(self, declared: DeclaredSymbolSet):
    self.declared = declared

  def visit_FunctionDecl(self, node: FunctionDecl) -> None:
    self.declared.add(node.name)


class UnknownCallFinder(NodeVisitor):
  """
  Lookup pass: records calls resolving to neither a declaration nor a builtin.
  """

  def __init__(self, declared: DeclaredSymbolSet, builtins: BuiltinRegistry):
    self.declared = declared
    self.builtins = builtins
    self.unknown: List[UnknownFunctionCall] = []

  def visit_FunctionCall(self, node: FunctionCall) -> None:
    if node.name in self.declared or node.name in self.builtins:
      return
    self.unknown.append(UnknownFunctionCall(node.name, node.pos.line, node.pos.column))


def collect_declared_functions(nodes: Sequence[PhpNode], case_sensitive: bool = True) -> DeclaredSymbolSet:
  """
  Runs the collection pass.

  Args:
      nodes (Sequence[PhpNode]): Root node sequence.
      case_sensitive (bool): Name comparison policy for the resulting set.

  Returns:
      DeclaredSymbolSet: Names of all declared functions.
  """
  declared = DeclaredSymbolSet(case_sensitive=case_sensitive)
  traverse(nodes, DeclaredFunctionCollector(declared))
  return declared


def find_unknown_function_calls(
  nodes: Sequence[PhpNode],
  declared: DeclaredSymbolSet,
  builtins: Optional[BuiltinRegistry] = None,
) -> List[UnknownFunctionCall]:
  """
  Runs the lookup pass.

  Args:
      nodes (Sequence[PhpNode]): Root node sequence.
      declared (DeclaredSymbolSet): Output of the collection pass.
      builtins (Optional[BuiltinRegistry]): Always-defined names. Defaults to the
          core builtin set with the same case policy as `declared`.

  Returns:
      List[UnknownFunctionCall]: Unknown calls in encounter order.
  """
  if builtins is None:
    builtins = BuiltinRegistry(case_sensitive=declared.case_sensitive)
  finder = UnknownCallFinder(declared, builtins)
  traverse(nodes, finder)
  return finder.unknown


def analyze_unknown_function_calls(
  nodes: Sequence[PhpNode],
  writer: Optional[TextIO] = None,
  config: Optional[AnalysisConfig] = None,
) -> List[UnknownFunctionCall]:
  """
  Reports calls to undeclared functions.

  Writes one `Unknown function: <name> at line <N>` line per unknown call.

  Args:
      nodes (Sequence[PhpNode]): Root node sequence.
      writer (Optional[TextIO]): Destination for diagnostic lines. Defaults to
          the active console's file.
      config (Optional[AnalysisConfig]): Builtins and case policy. Defaults to
          `AnalysisConfig()`; pass `AnalysisConfig.load()` to apply the
          `[tool.phpsniff]` table of the project's pyproject.toml.

  Returns:
      List[UnknownFunctionCall]: The reported calls, in encounter order.
  """
  config = config or AnalysisConfig()
  out = writer if writer is not None else default_writer()

  declared = collect_declared_functions(nodes, case_sensitive=config.case_sensitive_calls)
  unknown = find_unknown_function_calls(nodes, declared, BuiltinRegistry.from_config(config))

  for call in unknown:
    out.write(f"{call}\n")

  log_debug(f"Resolved calls: {len(declared)} declared function(s), {len(unknown)} unknown call(s)")
  if unknown:
    log_debug(f"Unknown names: {escape(', '.join(sorted({c.name for c in unknown})))}")
  return unknown
