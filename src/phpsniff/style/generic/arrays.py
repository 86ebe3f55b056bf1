"""
Generic.Arrays sniffs.
"""

from phpsniff.core.nodes import Array
from phpsniff.enums import Severity
from phpsniff.style.sniff import NodeSniff

LONG_ARRAY_MESSAGE = "Usage of long array syntax (array(...)) is disallowed; use short syntax ([...]) instead."


class DisallowLongArraySyntaxSniff(NodeSniff):
  """
  Reports array literals written with the `array(...)` keyword form.

  Only array-related nodes are descended into, so arrays nested inside function
  bodies, assignments or calls are not checked unless the sniff is built with
  `descend_into=None`.
  """

  code = "Generic.Arrays.DisallowLongArraySyntax"
  severity = Severity.ERROR
  fixable = True
  descend_into = frozenset({"Array", "ArrayItem", "KeyValue", "ArrayAccess"})

  def visit_Array(self, node: Array) -> None:
    if node.token_literal() == "array":
      self.add_issue(node, self.filename, LONG_ARRAY_MESSAGE)
