"""
Tests for Configuration Loading.

Verifies:
1.  Defaults when no `[tool.phpsniff]` table exists.
2.  Values read from the nearest pyproject.toml, searching parent directories.
3.  Explicit overrides win; `None` overrides are ignored.
4.  Validation errors surface as ValueError.
"""

import io
import sys
from pathlib import Path

import pytest

from phpsniff.analysis.symbols import analyze_unknown_function_calls
from phpsniff.config import AnalysisConfig
from phpsniff.core.nodes import ExpressionStmt, FunctionCall, Position

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


def _write_pyproject(path, body):
  (path / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults():
  config = AnalysisConfig()
  assert config.builtin_functions == []
  assert config.case_sensitive_calls is True
  assert config.indent_unit == "  "
  assert config.expand_tree is False


def test_load_without_tool_section(tmp_path):
  _write_pyproject(tmp_path, '[project]\nname = "demo"\n')
  assert AnalysisConfig.load(search_path=tmp_path) == AnalysisConfig()


def test_load_reads_tool_section_from_parent(tmp_path):
  _write_pyproject(
    tmp_path,
    '[tool.phpsniff]\nbuiltin_functions = ["printf", " sprintf "]\ncase_sensitive_calls = false\nexpand_tree = true\n',
  )
  nested = tmp_path / "src" / "php"
  nested.mkdir(parents=True)

  config = AnalysisConfig.load(search_path=nested)
  assert config.builtin_functions == ["printf", "sprintf"]
  assert config.case_sensitive_calls is False
  assert config.expand_tree is True


def test_overrides_take_precedence(tmp_path):
  _write_pyproject(tmp_path, '[tool.phpsniff]\nindent_unit = "    "\nexpand_tree = true\n')
  config = AnalysisConfig.load(search_path=tmp_path, indent_unit="\t", expand_tree=None)
  assert config.indent_unit == "\t"
  assert config.expand_tree is True


def test_blank_builtin_rejected(tmp_path):
  _write_pyproject(tmp_path, '[tool.phpsniff]\nbuiltin_functions = ["ok", "  "]\n')
  with pytest.raises(ValueError, match="Configuration validation failed"):
    AnalysisConfig.load(search_path=tmp_path)


def test_invalid_toml_falls_back_to_defaults(tmp_path, isolated_console):
  _write_pyproject(tmp_path, "[tool.phpsniff\nbroken = \n")
  assert AnalysisConfig.load(search_path=tmp_path) == AnalysisConfig()
  assert "Ignoring unreadable" in isolated_console.export_text()


def test_loaded_settings_drive_analysis(tmp_path):
  """
  Scenario: `printf` is listed under `[tool.phpsniff]`.
  Expectation: calls to it are only accepted when the loaded config is passed in.
  """
  _write_pyproject(tmp_path, '[tool.phpsniff]\nbuiltin_functions = ["printf"]\n')
  tree = [ExpressionStmt(FunctionCall("printf", pos=Position(2, 1)))]

  out = io.StringIO()
  analyze_unknown_function_calls(tree, writer=out, config=AnalysisConfig.load(search_path=tmp_path))
  assert out.getvalue() == ""

  analyze_unknown_function_calls(tree, writer=out)
  assert out.getvalue() == "Unknown function: printf at line 2\n"


def test_project_long_description_is_readme():
  root = Path(__file__).parent.parent
  with open(root / "pyproject.toml", "rb") as f:
    project = tomllib.load(f)["project"]
  assert project["readme"] == "README.md"
  assert (root / project["readme"]).read_text(encoding="utf-8").startswith("# phpsniff")
