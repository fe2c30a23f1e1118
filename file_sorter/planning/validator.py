"""
Plan validation for the file sorter.

Checks a plan before execution so that a bad plan fails before anything moves.
"""

from pathlib import Path

from .builder import Plan


def validate_plan(plan: Plan) -> list[str]:
    """
    Validate a sort plan before applying it.

    Checks for:
    - Planned folders whose path is already taken by a file
    - Destinations outside the root
    - Destinations whose parent folder is neither existing nor planned
    - Destination collisions (different sources -> same destination)
    - Destinations that already exist on disk
    - No-op moves (same source and destination)

    Args:
        plan: The plan from build_plan().

    Returns:
        A list of warnings for problems that do not block execution.

    Raises:
        ValueError: If the plan cannot be applied safely.
    """
    root = plan.root
    planned_dirs = plan.directories_to_create

    warnings = []
    errors = []

    for folder in sorted(planned_dirs):
        if folder.exists() and not folder.is_dir():
            errors.append(f"Folder path is taken by a file: {folder}")

    # Track destinations to detect collisions
    destinations: dict[Path, Path] = {}  # new -> old

    for old, new in plan.renames.items():
        if old == new:
            warnings.append(f"No-op move: {old}")
            continue

        if root not in new.parents:
            errors.append(f"Destination outside root: {new}")
            continue

        parent = new.parent
        if parent not in planned_dirs and not parent.is_dir():
            errors.append(f"No folder planned for: {new}")

        if new in destinations:
            errors.append(
                f"Collision: '{destinations[new]}' and '{old}' both target '{new}'"
            )
            continue
        destinations[new] = old

        if new.exists():
            errors.append(f"Destination already exists: {new}")

    if errors:
        error_msg = "Plan cannot be applied:\n" + "\n".join(f"  - {e}" for e in errors[:10])
        if len(errors) > 10:
            error_msg += f"\n  ... and {len(errors) - 10} more"
        raise ValueError(error_msg)

    return warnings
