"""FastMCP server exposing the theme file read/edit tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from theme_editor.core.editor import edit_theme_file as _edit_theme_file
from theme_editor.core.editor import read_theme_file as _read_theme_file
from theme_editor.core.errors import ThemeEditorError
from theme_editor.core.ports.root import RootDirectoryProvider
from theme_editor.models import AuthContext, EditRequest


def create_mcp_server(provider: RootDirectoryProvider, auth: AuthContext | None = None) -> FastMCP:
    """Create a FastMCP server bound to one root directory.

    The MCP transport runs as local tooling, so ``auth`` defaults to full capability.
    """
    ctx = auth if auth is not None else AuthContext.trusted(subject="mcp")
    mcp = FastMCP("theme-editor", instructions="Read and conditionally overwrite files inside a theme directory.")

    @mcp.tool()
    def read_theme_file(file: str) -> dict[str, Any]:
        """Read a theme file. Returns its code and the hash to pass as previous_hash when editing."""
        try:
            resolved, state = _read_theme_file(provider, file, ctx)
        except ThemeEditorError as exc:
            raise ToolError(f"{exc.code}: {exc.message}") from exc
        return {"file": resolved.relative, "code": state.text, "hash": state.hash, "success": True}

    @mcp.tool()
    def edit_theme_file(file: str, code: str, previous_hash: str) -> dict[str, Any]:
        """Overwrite a theme file if it is unchanged since the read that produced previous_hash."""
        try:
            result = _edit_theme_file(provider, EditRequest(file, code, previous_hash), ctx)
        except ThemeEditorError as exc:
            raise ToolError(f"{exc.code}: {exc.message}") from exc
        return {"success": result.success, "file": result.relative, "hash": result.hash}

    return mcp
