"""
Plan building for the file sorter.

Turns a directory listing and its extension groups into the folders to
create and the moves to make. Pure computation, nothing touches the disk.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ..scanner import DirectoryListing


@dataclass(frozen=True)
class Plan:
    """
    A sort plan.

    Attributes:
        root: The root directory the plan applies to.
        directories_to_create: Group folders (and, in recursive mode, their
            subfolders) that do not exist yet.
        renames: Old path -> new path for every file to move.
    """
    root: Path
    directories_to_create: frozenset[Path]
    renames: Mapping[Path, Path]

    def is_empty(self) -> bool:
        return not self.directories_to_create and not self.renames


def get_target_path(root: Path, key: str, file_path: Path) -> Path:
    """
    Compute where a file goes.

    The key is inserted as a new segment right under root and the rest of the
    path is kept, so 'root/a.csv' becomes 'root/_csv/a.csv' and, for nested
    files, 'root/sub/a.csv' becomes 'root/_csv/sub/a.csv'. The path is built
    from its parts, so a root name that recurs further down the path is left
    alone.
    """
    return root / key / file_path.relative_to(root)


def build_plan(listing: DirectoryListing, groups: Mapping[str, list[Path]]) -> Plan:
    """
    Build the plan for a scanned directory.

    Args:
        listing: The scan result.
        groups: Extension key -> files, from group_by_extension().

    Returns:
        The Plan. Folders already present in the listing are not recreated.
    """
    root = listing.root
    existing = listing.subdirectories

    to_create: set[Path] = set()
    renames: dict[Path, Path] = {}

    for key, files in groups.items():
        group_dir = root / key
        if group_dir not in existing and group_dir != root:
            to_create.add(group_dir)

        for f in files:
            new_path = get_target_path(root, key, f)
            renames[f] = new_path

            # Nested destinations need their intermediate folders too
            parent = new_path.parent
            while parent != group_dir and parent not in existing:
                to_create.add(parent)
                parent = parent.parent

    return Plan(
        root=root,
        directories_to_create=frozenset(to_create),
        renames=MappingProxyType(renames),
    )
