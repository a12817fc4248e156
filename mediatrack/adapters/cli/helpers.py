"""
Utilitaires partages pour les commandes CLI de MediaTrack.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le client HTTP
- exit_on_error : affiche un Err en rouge et termine la commande
"""

from functools import wraps

import typer
from rich.console import Console

from mediatrack.container import Container
from mediatrack.core.ports.api_clients import ApiResult, Err

# Console globale pour tous les affichages
console = Console()


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Le client HTTP du container est ferme a la fin de la commande.

    Usage:
        @with_container
        async def my_command(container, ...):
            service = container.library_service()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await container.api_client().close()
    return wrapper


def exit_on_error(*results: ApiResult) -> None:
    """Affiche le premier Err en rouge et termine la commande (code 1)."""
    for result in results:
        if isinstance(result, Err):
            console.print(f"Erreur: {result.message}", style="red", markup=False, highlight=False)
            raise typer.Exit(1)
