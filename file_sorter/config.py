"""
Run configuration for the file sorter.
"""

from dataclasses import dataclass

# Prefix for every generated group directory (e.g. "_csv")
GROUP_MARKER = "_"

# Group key for files without an extension
NO_EXTENSION_KEY = f"{GROUP_MARKER}no_ext"

# Names starting with this are treated as hidden
HIDDEN_PREFIX = "."


@dataclass(frozen=True)
class SortOptions:
    """
    Options for a single sort run.

    Built from the command line only; nothing is read from the environment
    or from config files.
    """
    include_hidden: bool = False
    recursive: bool = False
    dry_run: bool = False
