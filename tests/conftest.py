"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from theme_editor.roots import StaticRootProvider

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared theme directory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def theme_root(tmp_path: Path) -> Path:
    """A ``site/theme`` directory holding ``style.css`` and a nested template."""
    root = tmp_path / "site" / "theme"
    (root / "templates").mkdir(parents=True)
    (root / "style.css").write_text("body{}", encoding="utf-8")
    (root / "templates" / "index.html").write_text("<main></main>\n", encoding="utf-8")
    return root


@pytest.fixture
def provider(theme_root: Path) -> StaticRootProvider:
    return StaticRootProvider(theme_root)
