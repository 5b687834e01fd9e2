from pathlib import Path
from typing import Protocol


class RootDirectoryProvider(Protocol):
    def root_directory(self) -> Path: ...
