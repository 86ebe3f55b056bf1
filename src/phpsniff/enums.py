"""
Enumerations for phpsniff.

This module defines standard enumerations used across the codebase.
"""

from enum import Enum


class Severity(str, Enum):
  """
  Severity of a reported style issue.
  """

  ERROR = "ERROR"
  WARNING = "WARNING"
