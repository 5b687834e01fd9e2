"""Tests for the read/edit/hash CLI commands."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

from typer.testing import CliRunner

from theme_editor.cli.app import app

runner = CliRunner()


def _sha(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def test_read_prints_code(theme_root: Path) -> None:
    result = runner.invoke(app, ["read", "style.css", "--root", str(theme_root)])
    assert result.exit_code == 0
    assert result.stdout.startswith("body{}")


def test_read_json_payload(theme_root: Path) -> None:
    result = runner.invoke(app, ["read", "style.css", "--root", str(theme_root), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"file": "style.css", "code": "body{}", "hash": _sha("body{}"), "success": True}


def test_read_uses_root_from_environment(theme_root: Path) -> None:
    result = runner.invoke(app, ["read", "style.css", "--json"], env={"THEME_EDITOR_ROOT": str(theme_root)})
    assert result.exit_code == 0
    assert json.loads(result.stdout)["code"] == "body{}"


def test_read_outside_root_fails(theme_root: Path) -> None:
    result = runner.invoke(app, ["read", "../../../etc/hosts", "--root", str(theme_root)])
    assert result.exit_code == 1
    assert "path_outside_theme" in result.output


def test_edit_with_code(theme_root: Path) -> None:
    result = runner.invoke(
        app,
        ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("body{}"), "--code", "a{}"],
    )
    assert result.exit_code == 0
    assert _sha("a{}") in result.output
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "a{}"


def test_edit_with_source_file(theme_root: Path, tmp_path: Path) -> None:
    source = tmp_path / "new.css"
    source.write_text("h1{}\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("body{}"), "--source", str(source)],
    )
    assert result.exit_code == 0
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "h1{}\n"


def test_edit_stale_hash_exits_with_conflict_code(theme_root: Path) -> None:
    result = runner.invoke(
        app,
        ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("old"), "--code", "a{}"],
    )
    assert result.exit_code == 3
    assert "hash_mismatch" in result.output
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "body{}"


def test_edit_with_missing_source_is_a_usage_error(theme_root: Path, tmp_path: Path) -> None:
    missing = tmp_path / "missing.css"
    result = runner.invoke(
        app,
        ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("body{}"), "--source", str(missing)],
    )
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "body{}"


def test_edit_with_undecodable_source_fails_cleanly(theme_root: Path, tmp_path: Path) -> None:
    source = tmp_path / "latin1.css"
    source.write_bytes(b"p{content:\"\xe9\"}")
    result = runner.invoke(
        app,
        ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("body{}"), "--source", str(source)],
    )
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "body{}"


def test_edit_without_previous_hash(theme_root: Path) -> None:
    result = runner.invoke(app, ["edit", "style.css", "--root", str(theme_root), "--code", "a{}"])
    assert result.exit_code == 1
    assert "missing_previous_hash" in result.output


def test_edit_requires_one_content_source(theme_root: Path) -> None:
    result = runner.invoke(app, ["edit", "style.css", "--root", str(theme_root), "--previous-hash", _sha("body{}")])
    assert result.exit_code == 1
    assert (theme_root / "style.css").read_text(encoding="utf-8") == "body{}"


def test_hash_matches_read(theme_root: Path) -> None:
    result = runner.invoke(app, ["hash", str(theme_root / "style.css")])
    assert result.exit_code == 0
    assert result.stdout.strip() == _sha("body{}")
