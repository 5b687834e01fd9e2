"""Resolve caller-supplied relative paths and prove they stay inside the root directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from theme_editor.core.errors import InvalidPath, OutsideRoot
from theme_editor.models import ResolvedPath

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("theme_editor.audit")

_SEPARATORS = os.sep + (os.altsep or "")


def normalize_relative(relative: str) -> str:
    return relative.lstrip(_SEPARATORS)


def is_within(root: str, target: str) -> bool:
    """Segment-aware containment: ``/a/foo-evil`` is not inside ``/a/foo``."""
    if target == root:
        return True
    boundary = root if root.endswith(os.sep) else root + os.sep
    return target.startswith(boundary)


def _canonical(path: Path, *, strict: bool) -> Path:
    try:
        return Path(os.path.realpath(path, strict=strict))
    except (OSError, ValueError, RuntimeError) as exc:
        raise InvalidPath() from exc


def _ensure_within(real_root: Path, resolved: Path, relative: str) -> None:
    if not is_within(str(real_root), str(resolved)):
        audit_logger.warning(
            "Rejected path outside root: relative=%r resolved=%s root=%s", relative, resolved, real_root
        )
        raise OutsideRoot(relative)


def resolve(root: Path | str, relative: str) -> ResolvedPath:
    """Join ``relative`` onto ``root`` and return the canonical, contained target.

    The joined path is canonicalized (symlinks, ``.`` and ``..``) before the containment
    check, so traversal is judged by where the path actually lands. Containment is
    checked before existence: an escaping path is ``OutsideRoot`` even when its target
    is missing. A contained path that cannot be canonicalized strictly is ``InvalidPath``.
    """
    relative = normalize_relative(relative)
    real_root = _canonical(Path(root), strict=True)

    candidate = _canonical(real_root / relative, strict=False)
    _ensure_within(real_root, candidate, relative)

    target = _canonical(real_root / relative, strict=True)
    _ensure_within(real_root, target, relative)

    logger.debug("Resolved %r to %s", relative, target)
    return ResolvedPath(root=real_root, target=target, relative=relative)
