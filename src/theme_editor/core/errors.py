"""Typed failures raised by the path resolver and the conditional file editor.

Every failure carries a stable ``code`` (safe to match on in clients), a human-readable
``message`` and the HTTP ``status`` it maps to. Surfaces (HTTP, MCP, CLI) render these
instead of letting raw ``OSError``s escape.
"""

from __future__ import annotations

from typing import Any


class ThemeEditorError(Exception):
    code: str = "theme_editor_error"
    status: int = 500
    message: str = "Theme editor error."

    def __init__(self, message: str | None = None, *, code: str | None = None, status: int | None = None) -> None:
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": {"status": self.status}}


class MissingParameter(ThemeEditorError):
    code = "missing_parameter"
    status = 400
    message = "A required parameter is missing."

    @classmethod
    def file(cls) -> MissingParameter:
        return cls("File parameter is required.", code="missing_file")

    @classmethod
    def previous_hash(cls) -> MissingParameter:
        return cls("previous_hash is required. Read the file before writing.", code="missing_previous_hash")

    @classmethod
    def code_param(cls) -> MissingParameter:
        return cls("Code parameter is required.", code="missing_code")


class InvalidParameter(ThemeEditorError):
    code = "invalid_parameter"
    status = 400
    message = "A parameter is invalid."

    @classmethod
    def code_param(cls) -> InvalidParameter:
        return cls("Code must be encodable as UTF-8 text.", code="invalid_code")


class NotAuthorized(ThemeEditorError):
    code = "rest_forbidden"
    status = 403
    message = "Sorry, you are not allowed to edit theme files."

    @classmethod
    def unauthenticated(cls) -> NotAuthorized:
        return cls("Authentication credentials were not provided.", code="rest_unauthorized", status=401)


class InvalidPath(ThemeEditorError):
    code = "invalid_path"
    status = 400
    message = "File path is invalid."


class OutsideRoot(ThemeEditorError):
    """The canonical target escapes the root directory.

    ``relative`` is kept for audit logging only; it never appears in ``message``.
    """

    code = "path_outside_theme"
    status = 403
    message = "File must be within the active theme directory."

    def __init__(self, relative: str = "", message: str | None = None) -> None:
        self.relative = relative
        super().__init__(message)


class NotFound(ThemeEditorError):
    code = "file_not_found"
    status = 404
    message = "File does not exist."


class NotReadable(ThemeEditorError):
    code = "file_not_readable"
    status = 500
    message = "File is not readable."


class NotWritable(ThemeEditorError):
    code = "file_not_writable"
    status = 500
    message = "File is not writable."


class ReadFailed(ThemeEditorError):
    code = "read_failed"
    status = 500
    message = "Unable to read file."


class WriteFailed(ThemeEditorError):
    code = "write_failed"
    status = 500
    message = "Unable to write file."


class HashMismatch(ThemeEditorError):
    """The file changed since the caller last read it. Re-read, then retry the write."""

    code = "hash_mismatch"
    status = 409
    message = "File contents changed since last read. Please read the file again before writing."
