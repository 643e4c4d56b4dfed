from .task_parser import (
    is_tracked_task_line,
    parse_task_line,
    parse_content,
    update_content,
    parse_file,
    write_tasks,
)
from .vault_scanner import scan_tasks

__all__ = [
    "is_tracked_task_line",
    "parse_task_line",
    "parse_content",
    "update_content",
    "parse_file",
    "write_tasks",
    "scan_tasks",
]
