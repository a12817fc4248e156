"""Utilitaires partages (moyennes des notes, extraction des entites)."""

from mediatrack.utils.helpers import (
    average_of,
    book_rating_average,
    entities_of,
    movie_rating_average,
)

__all__ = ["average_of", "book_rating_average", "entities_of", "movie_rating_average"]
