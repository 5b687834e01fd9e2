import typer

from theme_editor.cli.files import edit, hash_file, read
from theme_editor.cli.serve import serve_app

app = typer.Typer(
    name="theme-editor",
    help="Theme Editor CLI: read and hash-guarded edits of theme files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("read")(read)
app.command("edit")(edit)
app.command("hash")(hash_file)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
