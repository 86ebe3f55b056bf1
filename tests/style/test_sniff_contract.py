"""
Tests for the Sniff Contract.

Verifies:
1.  `add_issue` stamps position, code and sniff defaults onto the issue.
2.  Issues accumulate across `check` calls and are never cleared.
3.  Fresh instances produce identical results for identical input.
4.  `descend_into` controls which children a `NodeSniff` explores.
"""

import pytest

from phpsniff.core.nodes import Assignment, ExpressionStmt, FunctionCall, FunctionDecl, Position, Variable
from phpsniff.enums import Severity
from phpsniff.style.issue import StyleIssue
from phpsniff.style.sniff import NodeSniff, Sniff


class CallCountSniff(NodeSniff):
  code = "Test.Calls.Reported"
  severity = Severity.WARNING

  def visit_FunctionCall(self, node):
    self.add_issue(node, self.filename, f"Call to {node.name}")


def test_sniff_is_abstract():
  with pytest.raises(TypeError):
    Sniff()


def test_add_issue_uses_node_position_and_defaults():
  sniff = CallCountSniff()
  issue = sniff.add_issue(FunctionCall("f", pos=Position(4, 9)), "a.php", "msg")

  assert issue == StyleIssue(
    filename="a.php",
    line=4,
    column=9,
    severity=Severity.WARNING,
    fixable=False,
    message="msg",
    code="Test.Calls.Reported",
  )
  assert issue.location == "a.php:4:9"
  assert sniff.issues == [issue]


def test_add_issue_overrides():
  sniff = CallCountSniff()
  issue = sniff.add_issue(FunctionCall("f"), "a.php", "msg", severity=Severity.ERROR, fixable=True)
  assert issue.severity == Severity.ERROR
  assert issue.fixable is True
  assert issue.line == 0


def test_issues_accumulate_across_checks():
  sniff = CallCountSniff()
  sniff.check([ExpressionStmt(FunctionCall("a", pos=Position(1, 1)))], "one.php")
  sniff.check([ExpressionStmt(FunctionCall("b", pos=Position(2, 1)))], "two.php")

  assert [(i.filename, i.message) for i in sniff.issues] == [
    ("one.php", "Call to a"),
    ("two.php", "Call to b"),
  ]


def test_fresh_instances_are_deterministic(program_tree):
  first, second = CallCountSniff(), CallCountSniff()
  first.check(program_tree, "prog.php")
  second.check(program_tree, "prog.php")
  assert first.issues == second.issues
  assert len(first.issues) == 3


def test_check_does_not_mutate_tree(assignment_tree):
  before = str(assignment_tree[0])
  CallCountSniff().check(assignment_tree, "x.php")
  assert str(assignment_tree[0]) == before


def test_descend_into_restricts_exploration():
  tree = [
    FunctionDecl("wrap", body=[ExpressionStmt(FunctionCall("inner"))]),
    ExpressionStmt(FunctionCall("outer")),
    Assignment(Variable("x"), FunctionCall("assigned")),
  ]
  sniff = CallCountSniff(descend_into={"ExpressionStmt"})
  sniff.check(tree, "f.php")
  assert [i.message for i in sniff.issues] == ["Call to outer"]


def test_descend_into_none_explores_everything():
  tree = [FunctionDecl("wrap", body=[ExpressionStmt(FunctionCall("inner"))])]
  sniff = CallCountSniff(descend_into=None)
  sniff.check(tree, "f.php")
  assert [i.message for i in sniff.issues] == ["Call to inner"]


def test_severity_values():
  assert Severity.ERROR.value == "ERROR"
  assert Severity.WARNING.value == "WARNING"
