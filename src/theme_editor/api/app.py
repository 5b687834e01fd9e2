from __future__ import annotations

from fastapi import FastAPI

from theme_editor.api.errors import register_exception_handlers
from theme_editor.api.routes.health import router as health_router
from theme_editor.api.routes.root import router as root_router
from theme_editor.api.routes.theme_files import router as theme_files_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Theme Editor API",
        description="Read and conditionally overwrite files inside the active theme directory.",
        version="0.1.0",
    )

    register_exception_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(theme_files_router)

    return app
