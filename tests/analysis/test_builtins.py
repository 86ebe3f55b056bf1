"""
Tests for the Builtin Function Registry.
"""

from phpsniff.analysis.builtins import DEFAULT_BUILTINS, BuiltinRegistry
from phpsniff.config import AnalysisConfig


def test_default_registry_contents():
  registry = BuiltinRegistry()
  assert list(registry) == ["count", "echo", "print", "strlen"]
  assert len(registry) == len(DEFAULT_BUILTINS)
  assert "strlen" in registry
  assert "array_map" not in registry


def test_register_extends_registry():
  registry = BuiltinRegistry()
  registry.register("array_map", "in_array")
  assert "array_map" in registry
  assert "in_array" in registry
  assert len(registry) == 6


def test_explicit_names_replace_defaults():
  registry = BuiltinRegistry(["var_dump"])
  assert list(registry) == ["var_dump"]
  assert "echo" not in registry


def test_case_policy():
  assert "STRLEN" not in BuiltinRegistry()
  assert "STRLEN" in BuiltinRegistry(case_sensitive=False)


def test_non_string_membership_is_false():
  assert 42 not in BuiltinRegistry()


def test_from_config_adds_configured_names():
  config = AnalysisConfig(builtin_functions=["printf", "sprintf"], case_sensitive_calls=False)
  registry = BuiltinRegistry.from_config(config)
  assert "PrintF" in registry
  assert "count" in registry
  assert len(registry) == 6
