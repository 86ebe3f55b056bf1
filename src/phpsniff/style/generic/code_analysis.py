"""
Generic.CodeAnalysis sniffs.

Flags assignments used as the condition of a control structure, a frequent
`=`-for-`==` typo:

1.  `if` and `elseif` conditions.
2.  `while` conditions.

The condition is searched through binary operands, call arguments, method call
receivers and interpolated string parts. Closures and nested arrays are not
searched. At most one issue is reported per condition, located at the first
assignment found.
"""

from typing import Optional

from phpsniff.core.nodes import ElseIf, If, PhpNode, While
from phpsniff.core.traversal import walk
from phpsniff.enums import Severity
from phpsniff.style.sniff import NodeSniff

_CONDITION_OPERAND_KINDS = frozenset({"BinaryExpr", "ExpressionStmt", "FunctionCall", "MethodCall", "InterpolatedString"})


def find_assignment(condition: Optional[PhpNode]) -> Optional[PhpNode]:
  """
  Returns the first `Assignment` within a condition expression.

  Args:
      condition (Optional[PhpNode]): The condition, possibly None.

  Returns:
      Optional[PhpNode]: The assignment, or None when the condition has none.
  """
  if condition is None:
    return None
  for node in walk([condition], descend=lambda n: n.kind in _CONDITION_OPERAND_KINDS):
    if node.kind == "Assignment":
      return node
  return None


class AssignmentInConditionSniff(NodeSniff):
  """Reports assignments inside `if`, `elseif` and `while` conditions."""

  code = "Generic.CodeAnalysis.AssignmentInCondition"
  severity = Severity.WARNING
  fixable = False

  def _check_condition(self, condition: PhpNode) -> None:
    assignment = find_assignment(condition)
    if assignment is not None:
      self.add_issue(assignment, self.filename, "Assignment in condition")

  def visit_If(self, node: If) -> None:
    self._check_condition(node.condition)

  def visit_ElseIf(self, node: ElseIf) -> None:
    self._check_condition(node.condition)

  def visit_While(self, node: While) -> None:
    self._check_condition(node.condition)
