"""
Style Issue Model.

A `StyleIssue` is one violation reported by a sniff: where it is, how severe it
is, whether it could be corrected automatically, and which rule produced it.
"""

from dataclasses import dataclass

from phpsniff.enums import Severity


@dataclass(frozen=True)
class StyleIssue:
  """
  A single reported style violation.

  Attributes:
      filename (str): File the issue was found in.
      line (int): Source line, 0 when the node had no position.
      column (int): Source column, 0 when unknown.
      severity (Severity): ERROR or WARNING.
      fixable (bool): Whether the violation could in principle be auto-corrected.
      message (str): Human readable description.
      code (str): Dotted rule identifier, e.g. `Generic.Arrays.DisallowLongArraySyntax`.
  """

  filename: str
  line: int
  column: int
  severity: Severity
  fixable: bool
  message: str
  code: str

  @property
  def location(self) -> str:
    """Returns `filename:line:column`."""
    return f"{self.filename}:{self.line}:{self.column}"
