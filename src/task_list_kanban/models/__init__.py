from .markers import (
    DEFAULT_DONE_STATUS_MARKERS,
    DEFAULT_IGNORED_STATUS_MARKERS,
    MarkerSet,
    ValidationError,
    create_done_status_markers,
    create_ignored_status_markers,
    create_marker_set,
    validate_done_status_markers,
    validate_ignored_status_markers,
    validate_markers,
)
from .columns import ARCHIVED_COLUMN, ColumnTagTable, kebab
from .task import Task, format_task
from .settings import BoardSettings, load_settings
from .board import Board, BoardColumn, DONE, UNCATEGORISED

__all__ = [
    "DEFAULT_DONE_STATUS_MARKERS",
    "DEFAULT_IGNORED_STATUS_MARKERS",
    "MarkerSet",
    "ValidationError",
    "create_done_status_markers",
    "create_ignored_status_markers",
    "create_marker_set",
    "validate_done_status_markers",
    "validate_ignored_status_markers",
    "validate_markers",
    "ARCHIVED_COLUMN",
    "ColumnTagTable",
    "kebab",
    "Task",
    "format_task",
    "BoardSettings",
    "load_settings",
    "Board",
    "BoardColumn",
    "DONE",
    "UNCATEGORISED",
]
