import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    root: Path
    api_token: str | None
    log_level: str


def get_settings() -> Settings:
    return Settings(
        root=Path(os.getenv("THEME_EDITOR_ROOT", os.getcwd())),
        api_token=os.getenv("THEME_EDITOR_API_TOKEN") or None,
        log_level=os.getenv("THEME_EDITOR_LOG_LEVEL", "INFO").upper(),
    )
