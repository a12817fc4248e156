"""
Ports (interfaces abstraites) de la couche domaine.

Exports :
- Ok / Err / ApiResult : Resultat type d'un appel au service
- ILibraryAPIClient : Contrat du client du service de bibliotheque
"""

from mediatrack.core.ports.api_clients import ApiResult, Err, ILibraryAPIClient, Ok

__all__ = ["ApiResult", "Err", "ILibraryAPIClient", "Ok"]
