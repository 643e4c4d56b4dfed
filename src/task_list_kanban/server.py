"""
REST API server entry point.

Startup sequence:
1. Read SETTINGS_FILE, API_HOST and API_PORT from environment
2. Load and validate board settings (exit on invalid settings)
3. Run the FastAPI app under uvicorn
"""

import logging
import os
import sys
from pathlib import Path

from task_list_kanban.models.settings import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    stream=sys.stderr,
)
log = logging.getLogger(__name__)

_DEFAULT_PORT = 8765


def main() -> None:
    import uvicorn

    from task_list_kanban.api.app import create_app

    settings_env = os.environ.get("SETTINGS_FILE", "")
    settings_path = Path(settings_env) if settings_env else None
    try:
        settings = load_settings(settings_path)
    except ValueError as e:
        log.error("Invalid settings in %s:\n%s", settings_path, e)
        sys.exit(1)

    host = os.environ.get("API_HOST", "127.0.0.1")
    port = int(os.environ.get("API_PORT", str(_DEFAULT_PORT)))

    app = create_app(settings)
    log.info("Starting REST API on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level="warning")


if __name__ == "__main__":
    main()
