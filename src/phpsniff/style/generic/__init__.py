"""
Generic sniffs, not tied to a particular coding standard.
"""

from phpsniff.style.generic.arrays import DisallowLongArraySyntaxSniff
from phpsniff.style.generic.code_analysis import AssignmentInConditionSniff

__all__ = ["AssignmentInConditionSniff", "DisallowLongArraySyntaxSniff"]
