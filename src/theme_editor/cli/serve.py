import logging

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.", no_args_is_help=True)
console = Console()


def _configure_logging() -> None:
    from theme_editor.config import get_settings

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from theme_editor.api.app import create_app

    _configure_logging()
    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from theme_editor.config import get_settings
    from theme_editor.mcp.server import create_mcp_server
    from theme_editor.roots import StaticRootProvider

    _configure_logging()
    server = create_mcp_server(StaticRootProvider(get_settings().root))
    # stdout carries the stdio protocol, so announce on stderr
    Console(stderr=True).print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
