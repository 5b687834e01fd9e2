"""Read a contained file and overwrite it only when its content hash is unchanged.

``write_file`` is a compare-and-swap over the filesystem: the caller supplies the
hash it last read, the editor re-reads under an exclusive lock, and the write only
happens when both hashes match. There is no retry loop here; on ``HashMismatch``
the caller re-reads and decides what to do.
"""

from __future__ import annotations

import errno
import fcntl
import hashlib
import hmac
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

from theme_editor.core.errors import (
    HashMismatch,
    InvalidParameter,
    MissingParameter,
    NotAuthorized,
    NotFound,
    NotReadable,
    NotWritable,
    OutsideRoot,
    ReadFailed,
    WriteFailed,
)
from theme_editor.core.paths import audit_logger, resolve
from theme_editor.core.ports.root import RootDirectoryProvider
from theme_editor.models import AuthContext, EditRequest, EditResult, FileState, ResolvedPath

logger = logging.getLogger(__name__)

_NOT_A_FILE = (errno.EISDIR, errno.ENOTDIR, errno.ELOOP)


def compute_hash(content: bytes) -> str:
    """SHA-256 of raw bytes, lowercase hex."""
    return hashlib.sha256(content).hexdigest()


def hashes_match(current: str, expected: str) -> bool:
    return hmac.compare_digest(current.encode("utf-8", "surrogatepass"), expected.encode("utf-8", "surrogatepass"))


def _require_regular_file(resolved: ResolvedPath) -> None:
    if not os.path.isfile(resolved.target):
        raise NotFound()


@contextmanager
def _locked(fh: IO[bytes], operation: int) -> Iterator[None]:
    fcntl.flock(fh.fileno(), operation)
    try:
        yield
    finally:
        fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


def _open_contained(resolved: ResolvedPath, flags: int, mode: str) -> IO[bytes]:
    """Open the target and check the descriptor still points at the contained file.

    A parent directory swapped for a symlink after ``resolve`` redirects the open, so the
    relative path is resolved again and its inode compared with the opened one.
    """
    fd = os.open(resolved.target, flags | os.O_NOFOLLOW)
    try:
        current = resolve(resolved.root, resolved.relative)
        if not os.path.samestat(os.fstat(fd), os.stat(current.target)):
            audit_logger.warning("Opened file is no longer %s under %s", resolved.relative, resolved.root)
            raise OutsideRoot(resolved.relative)
    except Exception:
        os.close(fd)
        raise
    return os.fdopen(fd, mode)


def read_file(resolved: ResolvedPath) -> FileState:
    """Read under a shared lock so a concurrent in-place write is never seen half done."""
    _require_regular_file(resolved)
    if not os.access(resolved.target, os.R_OK):
        raise NotReadable()

    try:
        fh = _open_contained(resolved, os.O_RDONLY, "rb")
    except FileNotFoundError as exc:
        raise NotFound() from exc
    except PermissionError as exc:
        raise NotReadable() from exc
    except OSError as exc:
        if exc.errno in _NOT_A_FILE:
            raise NotFound() from exc
        logger.exception("Opening %s for reading failed", resolved.target)
        raise ReadFailed() from exc

    with fh, _locked(fh, fcntl.LOCK_SH):
        try:
            content = fh.read()
        except OSError as exc:
            if exc.errno in _NOT_A_FILE:
                raise NotFound() from exc
            logger.exception("Reading %s failed", resolved.target)
            raise ReadFailed() from exc

    return FileState(content=content, hash=compute_hash(content))


def write_file(resolved: ResolvedPath, request: EditRequest) -> EditResult:
    _require_regular_file(resolved)
    if not os.access(resolved.target, os.W_OK):
        raise NotWritable()

    if request.content is None:
        raise MissingParameter.code_param()
    try:
        new_content = request.content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidParameter.code_param() from exc

    try:
        fh = _open_contained(resolved, os.O_RDWR, "r+b")
    except FileNotFoundError as exc:
        raise NotFound() from exc
    except PermissionError as exc:
        raise NotWritable() from exc
    except OSError as exc:
        if exc.errno in _NOT_A_FILE:
            raise NotFound() from exc
        logger.exception("Opening %s for writing failed", resolved.target)
        raise WriteFailed() from exc

    with fh, _locked(fh, fcntl.LOCK_EX):
        try:
            current = fh.read()
        except OSError as exc:
            logger.exception("Re-reading %s before write failed", resolved.target)
            raise ReadFailed("Unable to read file before writing.") from exc

        current_hash = compute_hash(current)
        if not hashes_match(current_hash, request.previous_hash):
            logger.info("Hash mismatch on %s: file changed since last read", resolved.relative)
            raise HashMismatch()

        try:
            fh.seek(0)
            fh.write(new_content)
            fh.truncate()
            fh.flush()
            os.fsync(fh.fileno())
        except OSError as exc:
            logger.exception("Writing %s failed", resolved.target)
            raise WriteFailed() from exc

    new_hash = compute_hash(new_content)
    logger.info("Wrote %d bytes to %s (hash %s)", len(new_content), resolved.relative, new_hash)
    return EditResult(relative=resolved.relative, hash=new_hash)


def _authorize(auth: AuthContext) -> None:
    if not auth.can_edit_files:
        logger.info("Denied theme file access for %s", auth.subject)
        raise NotAuthorized()


def read_theme_file(
    provider: RootDirectoryProvider, relative: str, auth: AuthContext
) -> tuple[ResolvedPath, FileState]:
    """Authorize, resolve under the provider's root, and read the file fresh from disk."""
    _authorize(auth)
    if not relative:
        raise MissingParameter.file()

    resolved = resolve(provider.root_directory(), relative)
    return resolved, read_file(resolved)


def edit_theme_file(provider: RootDirectoryProvider, request: EditRequest, auth: AuthContext) -> EditResult:
    """Authorize, validate, resolve, then compare-and-write.

    An empty ``previous_hash`` is always rejected: edits must be preceded by a read.
    Missing ``content`` is rejected, empty ``content`` is a valid edit that truncates the file.
    """
    _authorize(auth)
    if not request.relative:
        raise MissingParameter.file()
    if not request.previous_hash:
        raise MissingParameter.previous_hash()
    if request.content is None:
        raise MissingParameter.code_param()

    resolved = resolve(provider.root_directory(), request.relative)
    return write_file(resolved, request)
