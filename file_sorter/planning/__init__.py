"""
Planning module for the file sorter.

Provides:
- Extension classification
- Plan building
- Plan validation
"""

from .classifier import get_extension_key, group_by_extension
from .builder import Plan, build_plan, get_target_path
from .validator import validate_plan

__all__ = [
    "get_extension_key",
    "group_by_extension",
    "Plan",
    "build_plan",
    "get_target_path",
    "validate_plan",
]
