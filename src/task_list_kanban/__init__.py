"""
Kanban board core for markdown task lists.

Main API:
    from task_list_kanban import parse_task_line, is_tracked_task_line

    task = parse_task_line("- [ ] Write report #today", column_tags=table)
    task.archive()
    task.serialise()   # "- [x] Write report #archived"
"""

from task_list_kanban.models import (
    ARCHIVED_COLUMN,
    Board,
    BoardSettings,
    ColumnTagTable,
    MarkerSet,
    Task,
    ValidationError,
    create_done_status_markers,
    create_ignored_status_markers,
    format_task,
    kebab,
    validate_done_status_markers,
    validate_ignored_status_markers,
)
from task_list_kanban.parsers import (
    is_tracked_task_line,
    parse_content,
    parse_task_line,
    update_content,
)

__version__ = "0.1.0"

__all__ = [
    "ARCHIVED_COLUMN",
    "Board",
    "BoardSettings",
    "ColumnTagTable",
    "MarkerSet",
    "Task",
    "ValidationError",
    "create_done_status_markers",
    "create_ignored_status_markers",
    "format_task",
    "kebab",
    "validate_done_status_markers",
    "validate_ignored_status_markers",
    "is_tracked_task_line",
    "parse_content",
    "parse_task_line",
    "update_content",
]
