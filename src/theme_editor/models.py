"""Request-scoped value objects shared by the resolver, the editor and the surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ResolvedPath:
    root: Path
    target: Path
    relative: str


@dataclass(frozen=True)
class FileState:
    content: bytes
    hash: str

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileState):
            return NotImplemented
        return self.hash == other.hash

    def __hash__(self) -> int:
        return hash(self.hash)


@dataclass(frozen=True)
class EditRequest:
    relative: str
    content: str | None
    previous_hash: str


@dataclass(frozen=True)
class EditResult:
    relative: str
    hash: str
    success: bool = True


@dataclass(frozen=True)
class AuthContext:
    """Capability handed to the editor entry points by whichever surface authenticated the caller."""

    can_edit_files: bool
    subject: str = field(default="anonymous")

    @classmethod
    def trusted(cls, subject: str = "local") -> AuthContext:
        return cls(can_edit_files=True, subject=subject)

    @classmethod
    def denied(cls, subject: str = "anonymous") -> AuthContext:
        return cls(can_edit_files=False, subject=subject)
