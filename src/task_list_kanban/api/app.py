"""FastAPI application factory for the board REST API."""

from typing import Optional

from fastapi import APIRouter, FastAPI

from task_list_kanban.api.routes import register_routes
from task_list_kanban.models.settings import BoardSettings


def create_app(settings: Optional[BoardSettings] = None) -> FastAPI:
    """Build and return a FastAPI app wired to the given settings."""
    app = FastAPI(title="task-list-kanban", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_routes(api, settings or BoardSettings())
    app.include_router(api)

    return app
