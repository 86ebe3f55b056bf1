"""
Sniff Contract.

A sniff is a pluggable style rule. It exposes a single capability,
`check(nodes, filename)`, whose only effect is appending `StyleIssue` records to
the sniff's own `issues` list. Sniffs share no state, never mutate the tree,
and never clear earlier results: create a fresh instance per file when results
must be kept apart.

`NodeSniff` implements `check` on top of the traversal engine. Concrete rules
declare per-kind handlers (`visit_Array`, `visit_Class`, ...) and, through
`descend_into`, the closed set of node kinds whose children are explored.
"""

import abc
from typing import Any, FrozenSet, List, Optional, Sequence

from rich.markup import escape

from phpsniff.core.nodes import PhpNode
from phpsniff.core.traversal import NodeVisitor, traverse
from phpsniff.enums import Severity
from phpsniff.style.issue import StyleIssue
from phpsniff.utils.console import log_debug

_UNSET = object()


class Sniff(abc.ABC):
  """
  Abstract base class for all sniffs.

  Attributes:
      code (str): Dotted rule identifier stamped on every issue.
      severity (Severity): Default severity of reported issues.
      fixable (bool): Default fixability of reported issues.
      issues (List[StyleIssue]): Accumulated issues, in report order.
  """

  code: str = ""
  severity: Severity = Severity.ERROR
  fixable: bool = False

  def __init__(self) -> None:
    self.issues: List[StyleIssue] = []

  @abc.abstractmethod
  def check(self, nodes: Sequence[PhpNode], filename: str) -> None:
    """
    Inspects a file's node sequence, appending any violations to `issues`.

    Args:
        nodes (Sequence[PhpNode]): Root nodes of the file.
        filename (str): Name recorded on reported issues.
    """
    pass

  def add_issue(
    self,
    node: PhpNode,
    filename: str,
    message: str,
    severity: Optional[Severity] = None,
    fixable: Optional[bool] = None,
  ) -> StyleIssue:
    """
    Records an issue located at `node`.

    Args:
        node (PhpNode): The offending node.
        filename (str): File being checked.
        message (str): Description of the violation.
        severity (Optional[Severity]): Overrides the sniff default.
        fixable (Optional[bool]): Overrides the sniff default.

    Returns:
        StyleIssue: The recorded issue.
    """
    issue = StyleIssue(
      filename=filename,
      line=node.pos.line,
      column=node.pos.column,
      severity=self.severity if severity is None else severity,
      fixable=self.fixable if fixable is None else fixable,
      message=message,
      code=self.code,
    )
    self.issues.append(issue)
    return issue


class NodeSniff(Sniff, NodeVisitor):
  """
  Sniff driven by the generic traversal engine.

  Subclasses implement `visit_<Kind>(node)` handlers and read the file being
  checked from `self.filename`.

  Attributes:
      descend_into (Optional[FrozenSet[str]]): Node kinds whose children are
          explored. `None` explores every node. Root nodes are always inspected.
  """

  descend_into: Optional[FrozenSet[str]] = None

  def __init__(self, descend_into: Any = _UNSET) -> None:
    """
    Initializes the sniff.

    Args:
        descend_into: Overrides the class-level `descend_into`. Pass `None`
            to explore the whole tree.
    """
    super().__init__()
    if descend_into is not _UNSET:
      self.descend_into = None if descend_into is None else frozenset(descend_into)
    self.filename = ""

  def check(self, nodes: Sequence[PhpNode], filename: str) -> None:
    self.filename = filename
    before = len(self.issues)
    traverse(nodes, self)
    log_debug(f"{self.code or type(self).__name__}: {len(self.issues) - before} issue(s) in {escape(filename)}")

  def on_visit(self, node: PhpNode) -> bool:
    handler = getattr(self, f"visit_{node.kind}", None)
    if handler is not None:
      handler(node)
    return self.descend_into is None or node.kind in self.descend_into
