"""
Container d'injection de dependances via dependency-injector.

Porte les objets dont la duree de vie est celle de l'application :
la configuration, le client du service, le LibraryStore et le service
de synchronisation. Un nouveau Container donne un etat vierge (utile
pour les tests).
"""

from dependency_injector import containers, providers

from .adapters.api.library_client import LibraryAPIClient
from .config import Settings
from .services.library import LibraryService
from .services.store import LibraryStore


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.library_service()
        errors = await service.refresh_all()
        movies = container.store().filtered_movies.get()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client HTTP - Singleton, partage le pool de connexions
    api_client = providers.Singleton(
        LibraryAPIClient,
        base_url=config.provided.api_base_url,
        timeout=config.provided.request_timeout,
    )

    # Etat reactif - une seule instance par container
    store = providers.Singleton(LibraryStore)

    library_service = providers.Singleton(
        LibraryService,
        client=api_client,
        store=store,
    )
