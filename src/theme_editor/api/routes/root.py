from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "name": "Theme Editor API",
        "description": "Read and conditionally overwrite files inside the active theme directory.",
        "version": "0.1.0",
        "routes": {
            "self": "/",
            "read-theme-file": "/v1/read-theme-file",
            "edit-theme-file": "/v1/edit-theme-file",
            "health": "/health",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
