"""
Board settings.

Settings are stored as JSON next to the board and validated on load: marker
strings must pass the marker rules and column names must map to distinct
tags. Invalid settings are rejected as a whole, never patched up.
"""

import json
from pathlib import Path
from typing import List, Literal, Optional, Set

from pydantic import BaseModel, field_validator

from task_list_kanban.models.columns import ARCHIVED_COLUMN, ColumnTagTable, kebab
from task_list_kanban.models.markers import (
    DEFAULT_DONE_STATUS_MARKERS,
    DEFAULT_IGNORED_STATUS_MARKERS,
    MarkerSet,
    create_done_status_markers,
    create_ignored_status_markers,
)

DEFAULT_COLUMNS = ["Later", "Soonish", "Next week", "This week", "Today", "Pending"]


class BoardSettings(BaseModel):
    columns: List[str] = list(DEFAULT_COLUMNS)
    scope: Literal["folder", "everywhere"] = "folder"
    show_filepath: bool = True
    consolidate_tags: bool = False
    prevent_uncategorized: bool = False
    done_status_markers: str = DEFAULT_DONE_STATUS_MARKERS
    ignored_status_markers: str = DEFAULT_IGNORED_STATUS_MARKERS
    exclude_folders: List[str] = []
    collapsed_columns: List[str] = []

    @field_validator("columns")
    @classmethod
    def _check_columns(cls, columns: List[str]) -> List[str]:
        columns = [column.strip() for column in columns]
        if any(not column for column in columns):
            raise ValueError("Column names cannot be blank")
        for column in columns:
            if kebab(column) == ARCHIVED_COLUMN:
                raise ValueError(f"Column name '{column}' is reserved for archived tasks")
        # Raises on duplicate tags
        ColumnTagTable.from_columns(columns)
        return columns

    @field_validator("done_status_markers")
    @classmethod
    def _check_done_markers(cls, markers: str) -> str:
        create_done_status_markers(markers)
        return markers

    @field_validator("ignored_status_markers")
    @classmethod
    def _check_ignored_markers(cls, markers: str) -> str:
        create_ignored_status_markers(markers)
        return markers

    def column_table(self) -> ColumnTagTable:
        return ColumnTagTable.from_columns(self.columns)

    def done_markers(self) -> MarkerSet:
        return create_done_status_markers(self.done_status_markers)

    def ignored_markers(self) -> MarkerSet:
        return create_ignored_status_markers(self.ignored_status_markers)

    def collapsed_column_tags(self) -> Set[str]:
        return set(self.collapsed_columns)


def load_settings(path: Optional[Path]) -> BoardSettings:
    """
    Load settings from a JSON file.

    A missing path (or None) gives the defaults. Invalid content raises
    pydantic.ValidationError.
    """
    if path is None or not path.exists():
        return BoardSettings()
    return BoardSettings.model_validate(json.loads(path.read_text(encoding="utf-8")))
