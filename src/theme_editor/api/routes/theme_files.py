from fastapi import APIRouter, Depends, Query

from theme_editor.api.dependencies import get_auth_context, get_root_provider
from theme_editor.api.schemas import (
    EditThemeFileRequest,
    EditThemeFileResponse,
    ErrorResponse,
    ReadThemeFileResponse,
)
from theme_editor.core.editor import edit_theme_file as _edit_theme_file
from theme_editor.core.editor import read_theme_file as _read_theme_file
from theme_editor.core.ports.root import RootDirectoryProvider
from theme_editor.models import AuthContext, EditRequest

router = APIRouter(prefix="/v1", tags=["theme-files"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status: {"model": ErrorResponse} for status in (400, 401, 403, 404, 409, 500)
}


@router.get("/read-theme-file", response_model=ReadThemeFileResponse, responses=_ERROR_RESPONSES)
def read_theme_file(
    file: str | None = Query(None, description="Path relative to the theme directory."),
    provider: RootDirectoryProvider = Depends(get_root_provider),
    auth: AuthContext = Depends(get_auth_context),
) -> ReadThemeFileResponse:
    """Return the file's text and its SHA-256. Pass the hash back as ``previous_hash`` when editing."""
    resolved, state = _read_theme_file(provider, file or "", auth)
    return ReadThemeFileResponse(file=resolved.relative, code=state.text, hash=state.hash)


@router.api_route(
    "/edit-theme-file",
    methods=["POST", "PUT", "PATCH"],
    response_model=EditThemeFileResponse,
    responses=_ERROR_RESPONSES,
)
def edit_theme_file(
    body: EditThemeFileRequest | None = None,
    provider: RootDirectoryProvider = Depends(get_root_provider),
    auth: AuthContext = Depends(get_auth_context),
) -> EditThemeFileResponse:
    """Overwrite the file only if its current hash equals ``previous_hash``; 409 otherwise."""
    body = body or EditThemeFileRequest()
    request = EditRequest(relative=body.file or "", content=body.code, previous_hash=body.previous_hash or "")
    result = _edit_theme_file(provider, request, auth)
    return EditThemeFileResponse(file=result.relative, hash=result.hash, success=result.success)
