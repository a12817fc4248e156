"""
Fonctions utilitaires partagees dans le projet MediaTrack.

Ce module centralise le calcul des notes affichees :
- average_of : moyenne arithmetique, 0 pour une liste vide
- movie_rating_average / book_rating_average : moyenne des notes d'une entite

et le tri des resultats de collection :
- entities_of : entites typees d'un resultat (dict par ID ou liste)
"""

import math
from typing import Any, Iterable, TypeVar

from loguru import logger

from mediatrack.core.entities import Book, Movie

T = TypeVar("T")


def average_of(numbers: Iterable[float]) -> float:
    """
    Moyenne arithmetique d'une suite de nombres.

    Une suite vide renvoie 0 (ni erreur, ni NaN). La somme utilise
    math.fsum, le resultat ne depend donc pas de l'ordre des valeurs.
    """
    values = list(numbers)
    if not values:
        return 0
    return math.fsum(values) / len(values)


def movie_rating_average(movie: Movie) -> float:
    """Note moyenne d'un film sur l'ensemble de ses visionnages."""
    return average_of(rating.rating for rating in movie.ratings)


def book_rating_average(book: Book) -> float:
    """Note moyenne d'un livre, sur les lectures deja notees uniquement."""
    return average_of(
        reading.rating.rating for reading in book.readings if reading.rating is not None
    )


def entities_of(payload: Any, kind: type[T]) -> list[T]:
    """
    Extrait les entites d'un resultat de collection.

    Args:
        payload: Valeur d'un Ok (dict indexe par ID, liste, ou donnees brutes
            si le corps de la reponse ne correspondait pas au type attendu)
        kind: Type d'entite attendu

    Returns:
        Les elements de type kind, dans l'ordre. Les autres sont ignores.
    """
    if isinstance(payload, dict):
        items = list(payload.values())
    elif isinstance(payload, list):
        items = payload
    else:
        items = []

    entities = [item for item in items if isinstance(item, kind)]
    skipped = len(items) - len(entities)
    if skipped or not isinstance(payload, (dict, list)):
        logger.warning(
            "Elements mal formes ignores",
            kind=kind.__name__,
            skipped=skipped,
            payload_type=type(payload).__name__,
        )
    return entities
