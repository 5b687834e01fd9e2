from __future__ import annotations

from pathlib import Path


class StaticRootProvider:
    """A fixed root directory, typically the active theme directory from settings.

    Implements the ``RootDirectoryProvider`` protocol.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def root_directory(self) -> Path:
        return self._root

    def __repr__(self) -> str:
        return f"StaticRootProvider({str(self._root)!r})"
