"""Render ``ThemeEditorError`` as a structured JSON body with its mapped status."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from theme_editor.core.errors import ThemeEditorError

logger = logging.getLogger(__name__)


async def theme_editor_error_handler(request: Request, exc: ThemeEditorError) -> JSONResponse:
    if exc.status >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.exception_handler(ThemeEditorError)(theme_editor_error_handler)
