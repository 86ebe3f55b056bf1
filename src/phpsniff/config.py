"""
Runtime Configuration Store.

Holds the knobs of the analysis core: extra builtin function names, call-name
case sensitivity, and printer defaults. Values are read from the
`[tool.phpsniff]` table of the nearest `pyproject.toml` and may be overridden
by explicit arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.markup import escape

from phpsniff.utils.console import log_debug, log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class AnalysisConfig(BaseModel):
  """
  Configuration container for the analysis passes and the tree printer.
  """

  builtin_functions: List[str] = Field(
    default_factory=list,
    description="Function names treated as always defined, in addition to the defaults.",
  )
  case_sensitive_calls: bool = Field(True, description="If False, call names match declarations case-insensitively.")
  indent_unit: str = Field("  ", description="Indentation emitted per tree printer level.")
  expand_tree: bool = Field(False, description="If True, the printer renders labeled sub-sections.")

  @field_validator("builtin_functions")
  @classmethod
  def validate_builtins(cls, v: List[str]) -> List[str]:
    """
    Strips names and rejects empty entries.

    Args:
        v (List[str]): Raw names.

    Returns:
        List[str]: Cleaned names.

    Raises:
        ValueError: If a name is blank.
    """
    cleaned = [name.strip() for name in v]
    if any(not name for name in cleaned):
      raise ValueError("Builtin function names must not be empty.")
    return cleaned

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "AnalysisConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Field values taking precedence over the file. `None` values are ignored.

    Returns:
        AnalysisConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged values fail validation.
    """
    toml_config, found_in = _load_toml_settings(search_path or Path.cwd())
    if found_in is not None:
      log_debug(f"Loaded phpsniff settings from [path]{escape(str(found_in))}[/path]")
    merged: Dict[str, Any] = {**toml_config, **{k: v for k, v in overrides.items() if v is not None}}
    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"Configuration validation failed: {e}")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Ignoring unreadable [path]{escape(str(toml_path))}[/path]: {escape(str(e))}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("phpsniff", {}), parent

  return {}, None
