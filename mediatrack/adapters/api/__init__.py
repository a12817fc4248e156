"""
Client du service de bibliotheque.

Ce module fournit:
- execute: execution d'un appel HTTP, normalise en Ok / Err
- LibraryAPIClient: routes typees du service (films, livres, tags, recherche)

Le client implemente ILibraryAPIClient defini dans core/ports/api_clients.py.
"""

from mediatrack.adapters.api.library_client import LibraryAPIClient
from mediatrack.adapters.api.request_executor import execute, format_error

__all__ = [
    "LibraryAPIClient",
    "execute",
    "format_error",
]
