"""
File Sorter
===========

A command-line tool that groups loose files in a directory into
subdirectories named by file extension (all '.csv' files go to '_csv/').
"""

__version__ = "1.0.0"

from .scanner import scan_directory, DirectoryListing, ScanError
from .planning import Plan, build_plan, get_extension_key, group_by_extension, validate_plan
from .executor import apply_plan, ExecutionError
from .utils import save_json

__all__ = [
    "scan_directory",
    "DirectoryListing",
    "ScanError",
    "Plan",
    "build_plan",
    "get_extension_key",
    "group_by_extension",
    "validate_plan",
    "apply_plan",
    "ExecutionError",
    "save_json",
]
