"""
Point d'entree CLI de Filmorate.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="filmorate",
    help="Catalogue de films : notes des utilisateurs et amities",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()

    table = Table(title="Configuration Filmorate", show_header=False)
    table.add_column("Parametre", style="cyan")
    table.add_column("Valeur")
    table.add_row("Stockage", config.storage_backend)
    table.add_row("Base de donnees", config.database_url)
    table.add_row("Ecoute", f"{config.host}:{config.port}")
    table.add_row("Films populaires par defaut", str(config.popular_default_count))
    table.add_row("Niveau de log", config.log_level)
    table.add_row("Fichier de log", str(config.log_file))
    console.print(table)


@app.command(name="init-db")
def init_db() -> None:
    """Cree le schema et charge les referentiels (MPA, genres)."""
    config = get_config()
    if not config.uses_database:
        console.print("[yellow]Stockage memoire : aucune base a initialiser.[/yellow]")
        raise typer.Exit()

    container.database.init()

    table = Table(title="Referentiels", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    for mpa in container.mpa_service().get_all_mpa():
        table.add_row("MPA", str(mpa.id), mpa.name)
    for genre in container.genre_service().get_all_genres():
        table.add_row("Genre", str(genre.id), genre.name)
    container.session().close()
    console.print(table)
    console.print(f"[green]Base initialisee :[/green] {config.database_url}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP Filmorate."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    # log_config=None : uvicorn garde les handlers poses par configure_logging
    uvicorn.run(
        "filmorate.web.app:app", host=host, port=port, reload=reload, log_config=None
    )


def main() -> None:
    """Point d'entree de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(settings)

    logger.info(f"Demarrage de Filmorate (stockage : {settings.storage_backend})")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
