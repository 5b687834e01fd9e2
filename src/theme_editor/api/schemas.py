from __future__ import annotations

from pydantic import BaseModel

# --- Theme file endpoints ---


class ReadThemeFileResponse(BaseModel):
    file: str
    code: str
    hash: str
    success: bool = True


class EditThemeFileRequest(BaseModel):
    """Fields are optional at the schema level so that omissions surface as ``missing_*`` errors."""

    file: str | None = None
    code: str | None = None
    previous_hash: str | None = None


class EditThemeFileResponse(BaseModel):
    success: bool = True
    file: str
    hash: str


class ErrorData(BaseModel):
    status: int


class ErrorResponse(BaseModel):
    code: str
    message: str
    data: ErrorData


# --- Probes ---


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    root: str = "up"
