"""REST API routes for task-list-kanban."""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from task_list_kanban.api.task_handlers import (
    UntrackedLineError,
    handle_board,
    handle_markers_validate,
    handle_task_archive,
    handle_task_move,
    handle_task_parse,
)
from task_list_kanban.models.settings import BoardSettings


# ---------------------------------------------------------------------------
# Request body models
# ---------------------------------------------------------------------------


class MarkersBody(BaseModel):
    markers: str
    kind: Literal["done", "ignored"] = "done"


class TaskLineBody(BaseModel):
    line: str
    location: Optional[str] = None
    row_index: int = 0


class ArchiveBody(BaseModel):
    line: str


class MoveBody(BaseModel):
    line: str
    column: Optional[str] = None


class BoardBody(BaseModel):
    content: str
    location: Optional[str] = None


# ---------------------------------------------------------------------------
# Route registration
# ---------------------------------------------------------------------------


def register_routes(app_router: APIRouter, settings: BoardSettings) -> None:
    """Attach all REST routes that use the shared settings."""

    @app_router.get("/settings")
    def get_settings():
        return settings.model_dump()

    @app_router.post("/markers/validate")
    def validate_markers(body: MarkersBody):
        return handle_markers_validate(markers=body.markers, kind=body.kind)

    @app_router.post("/tasks/parse")
    def parse_task(body: TaskLineBody):
        return handle_task_parse(settings, **body.model_dump())

    @app_router.post("/tasks/archive")
    def archive_task(body: ArchiveBody):
        try:
            return handle_task_archive(settings, line=body.line)
        except UntrackedLineError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app_router.post("/tasks/move")
    def move_task(body: MoveBody):
        try:
            return handle_task_move(settings, line=body.line, column=body.column)
        except UntrackedLineError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app_router.post("/board")
    def get_board(body: BoardBody):
        return handle_board(settings, content=body.content, location=body.location)
