#!/usr/bin/env python3
"""
File Sorter - CLI Entry Point
=============================

Usage:
    python -m file_sorter /path/to/dir
    python -m file_sorter /path/to/dir --dry-run
    python -m file_sorter /path/to/dir --recursive --report-out report.json
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import SortOptions
from .scanner import ScanError, scan_directory
from .planning import build_plan, group_by_extension, validate_plan
from .executor import ExecutionError, apply_plan
from .utils import (
    save_json,
    console,
    print_header,
    print_groups,
    print_error,
    print_warning,
    print_success,
    print_plan_table,
)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def run(root: Path, options: SortOptions) -> dict:
    """
    Full pipeline: scan -> classify -> plan -> validate -> apply.

    Returns:
        The execution report.

    Raises:
        ScanError, ValueError, ExecutionError: See the individual stages.
    """
    console.print("\n[bold cyan][STEP 1] Scanning directory...[/bold cyan]")
    listing = scan_directory(root, include_hidden=options.include_hidden, recursive=options.recursive)
    console.print(
        f"[INFO] Found {len(listing.files)} files, {len(listing.subdirectories)} folders",
        markup=False
    )

    console.print("\n[bold cyan][STEP 2] Grouping by extension...[/bold cyan]")
    groups = group_by_extension(listing.files)
    if groups:
        print_groups(groups, listing.root)

    console.print("\n[bold cyan][STEP 3] Building plan...[/bold cyan]")
    plan = build_plan(listing, groups)
    for warning in validate_plan(plan):
        print_warning(warning)
    print_plan_table(plan)

    console.print("\n[bold cyan][STEP 4] Applying plan...[/bold cyan]")
    return apply_plan(plan, dry_run=options.dry_run)


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(
        prog="file-sorter",
        description="Create directories for each file type and move files into them"
    )
    parser.add_argument("root", type=Path, help="Directory to sort")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show what would be done without moving files")
    parser.add_argument("--recursive", "-r", action="store_true",
                        help="Also sort files in subfolders (keeps their relative path)")
    parser.add_argument("--include-hidden", action="store_true",
                        help="Also sort entries whose name starts with '.'")
    parser.add_argument("--report-out", type=Path, metavar="PATH",
                        help="Write the execution report as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    options = SortOptions(
        include_hidden=args.include_hidden,
        recursive=args.recursive,
        dry_run=args.dry_run,
    )

    mode_str = "DRY-RUN" if options.dry_run else "APPLY"
    depth_str = "recursive" if options.recursive else "top level"
    print_header("File Sorter", f"Root: {args.root}\nMode: {mode_str} ({depth_str})")

    # Fail before anything moves if the report has nowhere to go
    if args.report_out and not args.report_out.parent.is_dir():
        print_error(f"Cannot write report: folder not found: {args.report_out.parent}")
        return 1

    try:
        report = run(args.root, options)
    except ScanError as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        print_error(str(e))
        print_warning("Nothing was moved.")
        return 1
    except ExecutionError as e:
        print_error(str(e))
        print_warning("Partially sorted; completed moves were not undone.")
        return 1

    if args.report_out:
        try:
            save_json(report, args.report_out)
        except OSError as e:
            print_error(f"Cannot write report: {e}")
            print_warning("The sort itself completed.")
            return 1

    print_success("Operation Complete!")
    if options.dry_run:
        print_warning("This was a DRY-RUN. No files were actually moved.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
