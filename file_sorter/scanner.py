"""
Directory scanning for the file sorter.

Reads the root directory once, before anything is moved, and splits its
entries into subdirectories and files.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .config import GROUP_MARKER, HIDDEN_PREFIX
from .utils import print_warning


class ScanError(RuntimeError):
    """The root directory could not be read."""


@dataclass(frozen=True)
class DirectoryListing:
    """
    Snapshot of the root directory.

    Attributes:
        root: The resolved root directory.
        subdirectories: Every directory found under root.
        files: Every file found under root, in scan order.
    """
    root: Path
    subdirectories: frozenset[Path]
    files: tuple[Path, ...]


def _is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def _entry_is_dir(entry: os.DirEntry) -> bool:
    """Classify an entry by its file type, falling back to 'file'."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as e:
        print_warning(f"Cannot read type of {entry.path} ({e}), treating as file")
        return False


def _scan_top_level(root: Path, include_hidden: bool) -> tuple[set[Path], list[Path]]:
    dirs: set[Path] = set()
    files: list[Path] = []

    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise ScanError(f"Cannot read root directory: {root} ({e})") from e

    for entry in entries:
        if not include_hidden and _is_hidden(entry.name):
            continue

        path = root / entry.name
        if _entry_is_dir(entry):
            dirs.add(path)
        else:
            files.append(path)

    return dirs, files


def _scan_recursive(root: Path, include_hidden: bool) -> tuple[set[Path], list[Path]]:
    dirs: set[Path] = set()
    files: list[Path] = []

    def on_error(e: OSError):
        # The root itself failing is fatal, anything below is skipped
        if e.filename is None or Path(e.filename) == root:
            raise ScanError(f"Cannot read root directory: {root} ({e})") from e
        print_warning(f"Skipping unreadable entry: {e.filename} ({e.strerror})")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current = Path(dirpath)

        # 1. Prune hidden folders, and group folders from a previous run
        kept = []
        for d in sorted(dirnames):
            if not include_hidden and _is_hidden(d):
                continue
            dirs.add(current / d)
            if current == root and d.startswith(GROUP_MARKER):
                print_warning(f"Skipping folder {d}: names starting with '{GROUP_MARKER}' are left as they are")
                continue
            kept.append(d)
        dirnames[:] = kept

        # 2. Collect files
        for filename in sorted(filenames):
            if not include_hidden and _is_hidden(filename):
                continue
            files.append(current / filename)

    return dirs, files


def scan_directory(
    root: Path,
    include_hidden: bool = False,
    recursive: bool = False
) -> DirectoryListing:
    """
    Scan the root directory and list its subdirectories and files.

    Args:
        root: The directory to scan.
        include_hidden: If False, entries whose name starts with '.' are skipped.
        recursive: If True, walk the whole subtree instead of the top level only.
            Top-level group directories ('_csv', ...) are not descended into.

    Returns:
        A DirectoryListing for the root.

    Raises:
        ScanError: If the root does not exist, is not a directory or cannot be read.
    """
    root = Path(root).resolve()
    if not root.exists():
        raise ScanError(f"Root directory not found: {root}")
    if not root.is_dir():
        raise ScanError(f"Root is not a directory: {root}")

    if recursive:
        dirs, files = _scan_recursive(root, include_hidden)
    else:
        dirs, files = _scan_top_level(root, include_hidden)

    return DirectoryListing(
        root=root,
        subdirectories=frozenset(dirs),
        files=tuple(files),
    )
