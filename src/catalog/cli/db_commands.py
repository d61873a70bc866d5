"""Database maintenance commands."""

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from src.catalog.core.services.catalog import CatalogService
from src.catalog.core.services.database import DbManageService, DbSessionService
from src.catalog.entities import CatalogStore

console = Console()

db_app = typer.Typer(help="Manage the catalog database")


@db_app.command("init")
def init_db(
    reset: bool = typer.Option(
        False, "--reset", help="Drop every table before creating them"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Create the catalog tables."""
    service = DbSessionService()
    if not service.health_check():
        console.print("[red]❌ Database is not reachable[/red]")
        raise typer.Exit(code=1)

    manager = DbManageService(service.engine)
    if reset:
        if not yes and not Confirm.ask("Drop all catalog data?"):
            console.print("[yellow]Aborted[/yellow]")
            raise typer.Exit(code=1)
        manager.drop_all()
    manager.create_all()
    console.print("[green]✅ Catalog tables ready[/green]")


@db_app.command("stats")
def stats() -> None:
    """Show record counts."""
    service = DbSessionService()
    DbManageService(service.engine).create_all()
    with service.session_scope() as session:
        counts = CatalogService(CatalogStore.from_session(session)).counts()

    table = Table(title="Catalog records")
    table.add_column("Records", style="cyan")
    table.add_column("Count", style="green", justify="right")
    table.add_row("Books", str(counts["book_count"]))
    table.add_row("Copies", str(counts["book_instance_count"]))
    table.add_row("Copies available", str(counts["book_instance_available_count"]))
    table.add_row("Authors", str(counts["author_count"]))
    table.add_row("Genres", str(counts["genre_count"]))
    console.print(table)
