import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from theme_editor.core.editor import compute_hash
from theme_editor.core.editor import edit_theme_file as _edit_theme_file
from theme_editor.core.editor import read_theme_file as _read_theme_file
from theme_editor.core.errors import HashMismatch, ThemeEditorError
from theme_editor.core.ports.root import RootDirectoryProvider
from theme_editor.models import AuthContext, EditRequest

console = Console()
err_console = Console(stderr=True)

# The operator running the CLI already has filesystem access to the root.
_LOCAL_AUTH = AuthContext.trusted(subject="cli")

# Click already uses 2 for usage errors.
EXIT_CONFLICT = 3


def _get_provider(root: Path | None) -> RootDirectoryProvider:
    from theme_editor.config import get_settings
    from theme_editor.roots import StaticRootProvider

    return StaticRootProvider(root if root is not None else get_settings().root)


def _fail(exc: ThemeEditorError) -> typer.Exit:
    err_console.print(f"[red]{exc.code}[/red]: {exc.message}")
    return typer.Exit(EXIT_CONFLICT if isinstance(exc, HashMismatch) else 1)


RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Root directory. Defaults to THEME_EDITOR_ROOT or the working directory."),
]


def read(
    file: Annotated[str, typer.Argument(help="Path relative to the root directory.")],
    root: RootOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the JSON payload instead of raw code.")] = False,
) -> None:
    """Print a file's contents; its hash goes to stderr."""
    try:
        resolved, state = _read_theme_file(_get_provider(root), file, _LOCAL_AUTH)
    except ThemeEditorError as exc:
        raise _fail(exc) from exc

    if as_json:
        payload = {"file": resolved.relative, "code": state.text, "hash": state.hash, "success": True}
        typer.echo(json.dumps(payload))
        return
    typer.echo(state.text, nl=False)
    err_console.print(f"hash: {state.hash}")


def _read_source(source: Path) -> str:
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"[red]Cannot read --source {source}[/red]: {exc}")
        raise typer.Exit(1) from exc


def edit(
    file: Annotated[str, typer.Argument(help="Path relative to the root directory.")],
    previous_hash: Annotated[str, typer.Option("--previous-hash", help="Hash returned by the last read.")] = "",
    source: Annotated[
        Path | None,
        typer.Option(
            "--source", help="Local file holding the new contents.", exists=True, dir_okay=False, readable=True
        ),
    ] = None,
    code: Annotated[str | None, typer.Option("--code", help="New contents as a string.")] = None,
    root: RootOption = None,
) -> None:
    """Overwrite a file if it still matches --previous-hash."""
    if (source is None) == (code is None):
        err_console.print("[red]Provide exactly one of --source or --code.[/red]")
        raise typer.Exit(1)
    content = _read_source(source) if source is not None else code

    try:
        result = _edit_theme_file(_get_provider(root), EditRequest(file, content, previous_hash), _LOCAL_AUTH)
    except ThemeEditorError as exc:
        raise _fail(exc) from exc

    console.print(f"[green]Wrote[/green] {result.relative}")
    console.print(f"hash: {result.hash}")


def hash_file(
    path: Annotated[Path, typer.Argument(help="Local file to hash.", exists=True, dir_okay=False)],
) -> None:
    """Print the SHA-256 of a local file, in the same format the editor uses."""
    typer.echo(compute_hash(path.read_bytes()))
