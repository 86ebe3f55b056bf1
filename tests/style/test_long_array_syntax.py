"""
Tests for Generic.Arrays.DisallowLongArraySyntax.

Verifies:
1.  `array(...)` literals are reported as fixable errors.
2.  `[...]` literals are accepted.
3.  Long arrays nested in array items are found.
4.  By default, arrays under non-array nodes are not inspected; building the
    sniff with `descend_into=None` inspects the whole tree.
"""

from phpsniff.core.nodes import (
  Array,
  ArrayItem,
  Assignment,
  FunctionDecl,
  IntegerLiteral,
  KeyValue,
  Position,
  Return,
  StringLiteral,
  Variable,
)
from phpsniff.enums import Severity
from phpsniff.style.generic.arrays import LONG_ARRAY_MESSAGE, DisallowLongArraySyntaxSniff


def test_long_array_reported(long_array_tree):
  """Scenario: `array(1,2)`."""
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(long_array_tree, "test.php")

  assert len(sniff.issues) == 1
  issue = sniff.issues[0]
  assert issue.code == "Generic.Arrays.DisallowLongArraySyntax"
  assert issue.severity == Severity.ERROR
  assert issue.fixable is True
  assert issue.message == LONG_ARRAY_MESSAGE
  assert issue.location == "test.php:1:1"


def test_short_array_accepted():
  """Scenario: `[1,2]`."""
  tree = [Array(elements=[ArrayItem(IntegerLiteral(1)), ArrayItem(IntegerLiteral(2))], pos=Position(1, 1))]
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(tree, "test.php")
  assert sniff.issues == []


def test_nested_long_array_in_item():
  """Scenario: `[array(1), 'k' => array(2)]`."""
  inner_a = Array(elements=[ArrayItem(IntegerLiteral(1))], long_syntax=True, pos=Position(1, 2))
  inner_b = Array(elements=[ArrayItem(IntegerLiteral(2))], long_syntax=True, pos=Position(1, 19))
  tree = [
    Array(
      elements=[ArrayItem(inner_a), ArrayItem(inner_b, key=StringLiteral("k"))],
      pos=Position(1, 1),
    )
  ]
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(tree, "nested.php")
  assert [(i.line, i.column) for i in sniff.issues] == [(1, 2), (1, 19)]


def test_long_array_in_key_value():
  tree = [KeyValue(Array(long_syntax=True, pos=Position(2, 5)), key=StringLiteral("k"))]
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(tree, "kv.php")
  assert len(sniff.issues) == 1


def test_long_array_in_function_body_skipped_by_default():
  """
  Scenario: `function f() { return array(1); }`.
  Expectation: not inspected with the default descent set.
  """
  tree = [
    FunctionDecl(
      "f",
      body=[Return(Array(elements=[ArrayItem(IntegerLiteral(1))], long_syntax=True, pos=Position(1, 23)))],
      pos=Position(1, 1),
    )
  ]
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(tree, "fn.php")
  assert sniff.issues == []


def test_full_tree_descent_finds_nested_arrays():
  tree = [
    FunctionDecl("f", body=[Return(Array(long_syntax=True, pos=Position(1, 23)))]),
    Assignment(Variable("x"), Array(long_syntax=True, pos=Position(2, 6))),
  ]
  sniff = DisallowLongArraySyntaxSniff(descend_into=None)
  sniff.check(tree, "fn.php")
  assert [i.line for i in sniff.issues] == [1, 2]


def test_multiple_files_accumulate(long_array_tree):
  sniff = DisallowLongArraySyntaxSniff()
  sniff.check(long_array_tree, "a.php")
  sniff.check(long_array_tree, "b.php")
  assert [i.filename for i in sniff.issues] == ["a.php", "b.php"]
