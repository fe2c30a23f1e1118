"""
Extension classification for the file sorter.

Maps each file to a group key derived from its extension.
"""

from pathlib import Path
from typing import Iterable

from ..config import GROUP_MARKER, NO_EXTENSION_KEY


def get_extension_key(path: Path) -> str:
    """
    Derive the group key for a file.

    The key is the text after the last '.' of the base name, lower-cased and
    prefixed with the group marker, so 'data.CSV' gives '_csv'. Names with no
    dot, only a leading dot ('.bashrc') or a trailing dot ('notes.') have no
    extension and get NO_EXTENSION_KEY.

    Args:
        path: A file path.

    Returns:
        The group key, e.g. '_csv' or '_no_ext'.
    """
    stem, dot, ext = Path(path).name.rpartition(".")
    if not dot or not stem or not ext:
        return NO_EXTENSION_KEY
    return f"{GROUP_MARKER}{ext.lower()}"


def group_by_extension(files: Iterable[Path]) -> dict[str, list[Path]]:
    """
    Group files by extension key.

    Files keep their encounter order inside a group. Group order itself is not
    meaningful.
    """
    groups: dict[str, list[Path]] = {}
    for f in files:
        groups.setdefault(get_extension_key(f), []).append(Path(f))
    return groups
