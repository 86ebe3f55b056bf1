"""
Builtin Function Registry.

Names in the registry are treated as always defined, so calls to them are never
reported as unknown. The registry starts with a small core set and can be
extended from code or from `AnalysisConfig.builtin_functions`.
"""

from typing import Iterable, Iterator, Optional, Set

from phpsniff.config import AnalysisConfig

DEFAULT_BUILTINS = frozenset({"echo", "print", "strlen", "count"})


class BuiltinRegistry:
  """
  Extensible set of builtin function names.
  """

  def __init__(self, names: Optional[Iterable[str]] = None, case_sensitive: bool = True):
    """
    Initializes the registry.

    Args:
        names: Initial names. Defaults to `DEFAULT_BUILTINS`.
        case_sensitive: If False, lookups ignore case.
    """
    self.case_sensitive = case_sensitive
    self._names: Set[str] = set()
    self.register(*(DEFAULT_BUILTINS if names is None else names))

  @classmethod
  def from_config(cls, config: AnalysisConfig) -> "BuiltinRegistry":
    """
    Builds the default registry extended with configured names.

    Args:
        config (AnalysisConfig): Source of extra names and case policy.

    Returns:
        BuiltinRegistry: The populated registry.
    """
    registry = cls(case_sensitive=config.case_sensitive_calls)
    registry.register(*config.builtin_functions)
    return registry

  def _normalize(self, name: str) -> str:
    return name if self.case_sensitive else name.lower()

  def register(self, *names: str) -> None:
    """Adds names to the registry."""
    for name in names:
      self._names.add(self._normalize(name))

  def __contains__(self, name: object) -> bool:
    if not isinstance(name, str):
      return False
    return self._normalize(name) in self._names

  def __iter__(self) -> Iterator[str]:
    return iter(sorted(self._names))

  def __len__(self) -> int:
    return len(self._names)
