"""
Plan execution for the file sorter.

Applies a plan to the filesystem: all folders first, then all moves.
"""

from datetime import datetime
from pathlib import Path
from tqdm import tqdm

from .planning import Plan
from .utils import console, rel_path


class ExecutionError(RuntimeError):
    """A folder could not be created or a file could not be moved."""


def create_directories(directories, dry_run: bool = False) -> list[Path]:
    """
    Create every folder in the plan, parents included.

    Existing folders count as success. Stops at the first failure.

    Returns:
        The folders that did not exist before.

    Raises:
        ExecutionError: If a folder cannot be created.
    """
    created = []
    for folder in sorted(directories):
        if folder.is_dir():
            continue
        if not dry_run:
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ExecutionError(f"Failed to create folder {folder}: {e}") from e
        created.append(folder)
    return created


def move_file(src: Path, dst: Path) -> None:
    """
    Move a single file within the same filesystem.

    An existing destination is never overwritten and there is no copy
    fallback across devices.

    Raises:
        ExecutionError: If the move fails.
    """
    if dst.exists():
        raise ExecutionError(f"Failed to move {src} -> {dst}: destination exists")
    try:
        src.rename(dst)
    except OSError as e:
        raise ExecutionError(f"Failed to move {src} -> {dst}: {e}") from e


def apply_plan(plan: Plan, dry_run: bool = False) -> dict:
    """
    Apply (or simulate) the sort plan.

    Folder creation runs to completion before the first move. Either phase
    stops at the first error; moves already made are not undone.

    Args:
        plan: The plan from build_plan().
        dry_run: If True, print what would happen and touch nothing.

    Returns:
        Report dict with counts of created folders and moved files.

    Raises:
        ExecutionError: On the first failed operation.
    """
    root = plan.root
    mode = "DRY-RUN" if dry_run else "APPLY"
    console.print(f"\n[{mode}] Starting plan execution...", markup=False)

    # --- Step 1: Folders ---
    console.print(f"[INFO] Verifying/Creating {len(plan.directories_to_create)} folders...", markup=False)
    created = create_directories(plan.directories_to_create, dry_run=dry_run)
    if dry_run:
        for folder in created:
            console.print(f"  [WOULD CREATE] {rel_path(folder, root)}", markup=False)

    # --- Step 2: Moves ---
    console.print("[INFO] Processing moves...", markup=False)
    moved = 0

    if dry_run:
        for old, new in plan.renames.items():
            moved += 1
            if moved <= 10:
                console.print(f"  [WOULD MOVE] {rel_path(old, root)} -> {rel_path(new, root)}", markup=False)
        if moved > 10:
            console.print(f"  ... and {moved-10} more", markup=False)
    else:
        with tqdm(total=len(plan.renames), unit="file", disable=not plan.renames) as pbar:
            for old, new in plan.renames.items():
                move_file(old, new)
                moved += 1
                pbar.update(1)

    report = {
        "root": str(root),
        "dry_run": dry_run,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "created_folders_count": len(created),
        "executed_moves_count": moved,
    }

    console.print(f"\n[{mode}] Complete: {len(created)} folders created, {moved} moved", markup=False)

    return report
