#!/usr/bin/env python3
"""
task-kanban - command line front-end for markdown task boards

Usage:
    task-kanban validate [--done MARKERS] [--ignored MARKERS]
    task-kanban list <file> [--column TAG] [--archived]
    task-kanban move <file> <line> <column>
    task-kanban done <file> <line> [--undo]
    task-kanban archive <file> [--line N] [--dry-run]

Examples:
    task-kanban validate --done "xX✓"
    task-kanban list notes/TODO.md
    task-kanban move notes/TODO.md 12 "Next week"
    task-kanban archive notes/TODO.md --dry-run
    task-kanban --settings board.json list notes/TODO.md

Line numbers are 1-based, as shown by `list`.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from task_list_kanban.models.board import Board
from task_list_kanban.models.markers import validate_markers
from task_list_kanban.models.settings import BoardSettings, load_settings
from task_list_kanban.models.task import Task
from task_list_kanban.parsers.task_parser import parse_file, write_tasks

log = logging.getLogger(__name__)


# --- helpers ---

def _load_tasks(args) -> List[Task]:
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}")
        sys.exit(1)
    tasks = parse_file(file_path, args.settings)
    log.debug("Loaded %d task(s) from %s", len(tasks), file_path)
    return tasks


def _find_task(tasks: List[Task], line: int) -> Task:
    for task in tasks:
        if task.row_index == line - 1:
            return task
    print(f"Error: Line {line} is not a tracked task.")
    sys.exit(1)


def _format_row(task: Task) -> str:
    return f"{task.row_index + 1:>5}  {task.serialise().strip()}"


# --- validate ---

def validate_cmd(args):
    """Check done/ignored marker strings."""
    settings: BoardSettings = args.settings
    checks = [
        ("done", args.done if args.done is not None else settings.done_status_markers),
        ("ignored", args.ignored if args.ignored is not None else settings.ignored_status_markers),
    ]

    failed = False
    for kind, markers in checks:
        violations = validate_markers(markers, require_non_empty=(kind == "done"), kind=kind)
        if violations:
            failed = True
            print(f"Invalid {kind} status markers {markers!r}:")
            for violation in violations:
                print(f"  - {violation}")
        else:
            print(f"{kind.capitalize()} status markers {markers!r}: OK")

    if failed:
        sys.exit(1)


# --- list ---

def list_cmd(args):
    """Print the board for one file, column by column."""
    tasks = _load_tasks(args)
    board = Board.from_tasks(tasks, args.settings)

    total = 0
    for column in board.columns:
        if args.column and column.tag != args.column:
            continue
        suffix = " (collapsed)" if column.collapsed else ""
        print(f"{column.title} [{len(column.tasks)}]{suffix}")
        for task in column.tasks:
            print(_format_row(task))
        print()
        total += len(column.tasks)

    if args.archived:
        archived = [t for t in tasks if t.archived]
        print(f"Archived [{len(archived)}]")
        for task in archived:
            print(_format_row(task))
        print()

    print(f"{total} task(s) on board.")


# --- move ---

def move_cmd(args):
    """Move a task to another column."""
    tasks = _load_tasks(args)
    task = _find_task(tasks, args.line)
    board = Board.from_tasks(tasks, args.settings)

    tag = args.settings.column_table().tag_for_column(args.column)
    try:
        board.move_task(task, tag)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    write_tasks(Path(args.file), [task])
    print(f"Moved line {args.line} to {args.column}")
    print(_format_row(task))


# --- done ---

def done_cmd(args):
    """Mark a task done (or open again with --undo)."""
    tasks = _load_tasks(args)
    task = _find_task(tasks, args.line)
    task.done = not args.undo
    write_tasks(Path(args.file), [task])
    print(_format_row(task))


# --- archive ---

def archive_cmd(args):
    """Archive one task, or every done task that isn't archived yet."""
    tasks = _load_tasks(args)
    if args.line is not None:
        targets = [_find_task(tasks, args.line)]
    else:
        targets = [t for t in tasks if t.done and not t.archived]

    if not targets:
        print("No tasks to archive")
        return

    for task in targets:
        task.archive()

    if args.dry_run:
        print(f"Would archive {len(targets)} task(s) (dry run)")
    else:
        write_tasks(Path(args.file), targets)
        print(f"Archived {len(targets)} task(s)")
    for task in targets:
        print(_format_row(task))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-kanban",
        description="Kanban board for markdown task lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--settings', help='Path to board settings JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # --- validate ---
    validate_p = subparsers.add_parser('validate', help='Validate status markers')
    validate_p.add_argument('--done', help='Done status markers (default: from settings)')
    validate_p.add_argument('--ignored', help='Ignored status markers (default: from settings)')
    validate_p.set_defaults(func=validate_cmd)

    # --- list ---
    list_p = subparsers.add_parser('list', help='Show the board for a file')
    list_p.add_argument('file', help='Markdown file')
    list_p.add_argument('--column', help='Only show the column with this tag')
    list_p.add_argument('--archived', action='store_true', help='Also list archived tasks')
    list_p.set_defaults(func=list_cmd)

    # --- move ---
    move_p = subparsers.add_parser('move', help='Move a task to another column')
    move_p.add_argument('file', help='Markdown file')
    move_p.add_argument('line', type=int, help='Line number of the task')
    move_p.add_argument('column', help='Column name or tag (done, uncategorised too)')
    move_p.set_defaults(func=move_cmd)

    # --- done ---
    done_p = subparsers.add_parser('done', help='Mark a task done')
    done_p.add_argument('file', help='Markdown file')
    done_p.add_argument('line', type=int, help='Line number of the task')
    done_p.add_argument('--undo', action='store_true', help='Mark the task open again')
    done_p.set_defaults(func=done_cmd)

    # --- archive ---
    archive_p = subparsers.add_parser('archive', help='Archive done tasks')
    archive_p.add_argument('file', help='Markdown file')
    archive_p.add_argument('--line', type=int, help='Archive only this line (done or not)')
    archive_p.add_argument('--dry-run', action='store_true', help='Preview without modifying')
    archive_p.set_defaults(func=archive_cmd)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        args.settings = load_settings(Path(args.settings) if args.settings else None)
    except ValueError as e:
        print(f"Error: Invalid settings: {e}")
        sys.exit(1)

    args.func(args)


if __name__ == '__main__':
    main()
