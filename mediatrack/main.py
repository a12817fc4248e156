"""
Point d'entrée CLI de MediaTrack.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import books, movies, search, tags
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="mediatrack",
    help="Consultation de la bibliotheque de films et de livres",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MediaTrack - Bibliotheque personnelle de films et de livres."""
    settings = get_config()
    configure_logging(
        log_level=level_for_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(movies)
app.command()(books)
app.command()(tags)
app.command()(search)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MediaTrack")
    typer.echo(f"Service : {config.api_base_url}")
    typer.echo(f"Timeout : {config.request_timeout}s")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaTrack v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
