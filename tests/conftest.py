"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so log output from one test never leaks into another.
- Shared syntax tree fixtures mirroring small PHP snippets.
"""

import io
import sys
from pathlib import Path
from typing import List

import pytest
from rich.console import Console

# Add src to path so we can import 'phpsniff' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from phpsniff.core.nodes import (  # noqa: E402
  Array,
  ArrayItem,
  Assignment,
  ExpressionStmt,
  FunctionCall,
  FunctionDecl,
  IntegerLiteral,
  PhpNode,
  Position,
  Return,
  StringLiteral,
  Variable,
)
from phpsniff.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_console():
  """
  Routes console and logging output to an in-memory buffer for each test.

  Yields:
      Console: The recording console.
  """
  buffer = Console(file=io.StringIO(), record=True, width=120)
  set_console(buffer)
  yield buffer
  reset_console()


@pytest.fixture
def assignment_tree() -> List[PhpNode]:
  """Tree for `<?php $name = 'John'; ?>`."""
  return [
    Assignment(
      left=Variable("name", pos=Position(1, 8, 6)),
      right=StringLiteral("John", pos=Position(1, 16, 14)),
      pos=Position(1, 8, 6),
    )
  ]


@pytest.fixture
def long_array_tree() -> List[PhpNode]:
  """Tree for a bare `array(1,2)` literal."""
  return [
    Array(
      elements=[
        ArrayItem(IntegerLiteral(1, pos=Position(1, 7)), pos=Position(1, 7)),
        ArrayItem(IntegerLiteral(2, pos=Position(1, 9)), pos=Position(1, 9)),
      ],
      long_syntax=True,
      pos=Position(1, 1),
    )
  ]


@pytest.fixture
def program_tree() -> List[PhpNode]:
  """
  Tree for:

      function greet($who) { return strlen($who); }
      greet('x');
      shout('y');
  """
  return [
    FunctionDecl(
      "greet",
      params=[Variable("who", pos=Position(1, 16))],
      body=[
        Return(
          FunctionCall("strlen", args=[Variable("who", pos=Position(1, 38))], pos=Position(1, 31)),
          pos=Position(1, 24),
        )
      ],
      pos=Position(1, 1),
    ),
    ExpressionStmt(FunctionCall("greet", args=[StringLiteral("x", pos=Position(2, 7))], pos=Position(2, 1)), pos=Position(2, 1)),
    ExpressionStmt(FunctionCall("shout", args=[StringLiteral("y", pos=Position(3, 7))], pos=Position(3, 1)), pos=Position(3, 1)),
  ]
