"""
Execution d'une requete vers le service de bibliotheque.

Attend un appel HTTP deja emis et normalise son issue en un ApiResult :
- Ok(valeur decodee) pour un statut 2xx
- Ok(None) pour un statut 2xx quand aucun corps n'est attendu
- Ok(donnees brutes) pour un statut 2xx dont le corps ne correspond pas
  au type attendu : l'appelant distingue par isinstance()
- Err(message) pour tout autre statut, ou si la requete n'aboutit pas

Aucun retry, aucun cache : un seul aller-retour par appel.

Usage:
    result = await execute(client.get("/api/tag"), dict[int, Tag])
    match result:
        case Ok(tags):
            ...
        case Err(message):
            print(message)
"""

from functools import lru_cache
from typing import Any, Awaitable, Optional

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from mediatrack.core.ports.api_clients import ApiResult, Err, Ok


def format_error(status_code: int, reason_phrase: str, body: str) -> str:
    """Formate le message d'erreur affiche pour une reponse hors 2xx."""
    return f"Server responded with {status_code} ({reason_phrase}): {body}"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode(data: Any, response_type: Any) -> Any:
    """
    Decode un document JSON deja parse vers le type attendu.

    Raises:
        pydantic.ValidationError: Si le document ne correspond pas au type
    """
    return _adapter(response_type).validate_python(data)


def encode(value: Any) -> Any:
    """Serialise une entite (dataclass) en document JSON."""
    return _adapter(type(value)).dump_python(value, mode="json")


async def execute(
    pending: Awaitable[httpx.Response],
    response_type: Optional[Any] = None,
    expects_body: bool = True,
) -> ApiResult:
    """
    Attend un appel HTTP et convertit son issue en ApiResult.

    Args:
        pending: Appel en cours (coroutine ou awaitable renvoyant une httpx.Response)
        response_type: Type vers lequel decoder le corps (ex: Movie, dict[int, Tag]).
            None renvoie le JSON brut.
        expects_body: False si la reponse n'a pas de corps utile

    Returns:
        Ok avec la valeur decodee (None si expects_body=False), ou Err
        avec le message "Server responded with {status} ({raison}): {corps}".
        Un corps 2xx qui ne correspond pas a response_type est renvoye
        tel quel dans Ok (JSON brut, ou texte si le corps n'est pas du JSON).
    """
    try:
        response = await pending
    except httpx.RequestError as e:
        logger.warning("Request failed", error=str(e))
        return Err(f"Request failed: {e}")

    status = response.status_code
    if status < 200 or status >= 300:
        message = format_error(status, response.reason_phrase, response.text)
        logger.warning("Server responded with an error", status=status)
        return Err(message)

    logger.debug("Request succeeded", status=status)
    if not expects_body:
        return Ok(None)

    try:
        data = response.json()
    except ValueError:
        logger.warning("Response body is not JSON", status=status)
        return Ok(response.text or None)

    if response_type is None:
        return Ok(data)
    try:
        return Ok(decode(data, response_type))
    except ValidationError as e:
        logger.warning(
            "Response body does not match expected type",
            expected=str(response_type),
            errors=e.error_count(),
        )
        return Ok(data)
