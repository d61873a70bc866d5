"""Run the web application."""

import typer
from rich.console import Console

from src.catalog.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Serve the catalog with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port
    console.print(f"[green]Serving {config.app.title} on http://{host}:{port}/catalog[/green]")
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )
