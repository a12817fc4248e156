"""
Service de synchronisation de la bibliotheque.

Relie le client du service distant au LibraryStore : les resultats des
appels sont ecrits dans les conteneurs, et les vues filtrees sont
recalculees apres chaque changement de la collection complete.

Les erreurs ne sont jamais levees : chaque operation renvoie l'ApiResult
du client (ou la liste des messages d'erreur pour refresh_all).
"""

import asyncio
import bisect
from dataclasses import dataclass, replace
from typing import Optional

from loguru import logger

from mediatrack.core.entities import Book, Movie, Rating, Tag
from mediatrack.core.ports.api_clients import ApiResult, Err, ILibraryAPIClient, Ok
from mediatrack.core.value_objects import resolve_dark_theme
from mediatrack.services.store import LibraryStore
from mediatrack.utils.helpers import entities_of


@dataclass(frozen=True)
class MovieFilter:
    """
    Critere de filtrage des films.

    Attributs :
        show_seen : Inclure les films deja notes
        show_unseen : Inclure les films sans note
        search : Texte recherche dans le titre (insensible a la casse)
    """

    show_seen: bool = False
    show_unseen: bool = True
    search: str = ""

    def matches(self, movie: Movie) -> bool:
        if movie.seen and not self.show_seen:
            return False
        if not movie.seen and not self.show_unseen:
            return False
        return self.search.lower() in movie.title.lower()

    def apply(self, movies: list[Movie]) -> list[Movie]:
        """Retourne les films retenus, tries par titre."""
        return sorted((m for m in movies if self.matches(m)), key=lambda m: m.title)


@dataclass(frozen=True)
class BookFilter:
    """
    Critere de filtrage des livres.

    Attributs :
        show_read : Inclure les livres ayant au moins une lecture notee
        show_unread : Inclure les autres livres
        search : Texte recherche dans le titre et les auteurs
    """

    show_read: bool = True
    show_unread: bool = True
    search: str = ""

    def matches(self, book: Book) -> bool:
        read = any(reading.rating is not None for reading in book.readings)
        if read and not self.show_read:
            return False
        if not read and not self.show_unread:
            return False
        needle = self.search.lower()
        return needle in book.title.lower() or any(
            needle in author.lower() for author in book.authors
        )

    def apply(self, books: list[Book]) -> list[Book]:
        """Retourne les livres retenus, tries par titre."""
        return sorted((b for b in books if self.matches(b)), key=lambda b: b.title)


class LibraryService:
    """
    Service de chargement et de modification de la bibliotheque.

    Ecrit les resultats du client dans le LibraryStore et maintient
    filtered_movies / filtered_books a jour avec le dernier filtre applique.
    """

    def __init__(self, client: ILibraryAPIClient, store: LibraryStore) -> None:
        """
        Initialise le service.

        Args:
            client: Client du service de bibliotheque
            store: Etat en memoire a alimenter
        """
        self._client = client
        self._store = store
        self._movie_filter = MovieFilter()
        self._book_filter = BookFilter()

    @property
    def store(self) -> LibraryStore:
        return self._store

    @property
    def movie_filter(self) -> MovieFilter:
        return self._movie_filter

    @property
    def book_filter(self) -> BookFilter:
        return self._book_filter

    # Chargement

    async def refresh_movies(self) -> ApiResult[list[Movie]]:
        """Recharge tous les films dans all_movies, puis la vue filtree."""
        result = await self._client.get_movies()
        if isinstance(result, Err):
            return result
        movies = entities_of(result.value, Movie)
        self._store.all_movies.set(movies)
        self._refilter_movies()
        logger.info("Films charges", count=len(movies))
        return Ok(movies)

    async def refresh_tags(self) -> ApiResult[dict[int, Tag]]:
        """Recharge l'index des tags."""
        result = await self._client.get_tags()
        if isinstance(result, Err):
            return result
        tags = {tag.id: tag for tag in entities_of(result.value, Tag)}
        self._store.tags.set(tags)
        logger.info("Tags charges", count=len(tags))
        return Ok(tags)

    async def refresh_books(self) -> ApiResult[list[Book]]:
        """Recharge tous les livres dans all_books, puis la vue filtree."""
        result = await self._client.get_books()
        if isinstance(result, Err):
            return result
        books = entities_of(result.value, Book)
        self._store.all_books.set(books)
        self._refilter_books()
        logger.info("Livres charges", count=len(books))
        return Ok(books)

    async def refresh_all(self) -> list[str]:
        """
        Recharge films, tags et livres en parallele.

        fetching vaut True pendant le chargement.

        Returns:
            Messages d'erreur des chargements en echec (vide si tout a reussi)
        """
        self._store.fetching.set(True)
        try:
            results = await asyncio.gather(
                self.refresh_movies(),
                self.refresh_tags(),
                self.refresh_books(),
            )
        finally:
            self._store.fetching.set(False)

        errors = [result.message for result in results if isinstance(result, Err)]
        for message in errors:
            logger.error("Echec du chargement", error=message)
        return errors

    # Filtres

    def apply_movie_filter(self, movie_filter: MovieFilter) -> list[Movie]:
        """Applique un nouveau filtre et met a jour filtered_movies."""
        self._movie_filter = movie_filter
        return self._refilter_movies()

    def apply_book_filter(self, book_filter: BookFilter) -> list[Book]:
        """Applique un nouveau filtre et met a jour filtered_books."""
        self._book_filter = book_filter
        return self._refilter_books()

    def _refilter_movies(self) -> list[Movie]:
        filtered = self._movie_filter.apply(self._store.all_movies.get())
        self._store.filtered_movies.set(filtered)
        return filtered

    def _refilter_books(self) -> list[Book]:
        filtered = self._book_filter.apply(self._store.all_books.get())
        self._store.filtered_books.set(filtered)
        return filtered

    # Modifications

    async def add_movie(self, movie: Movie) -> ApiResult[None]:
        """Ajoute un film au service, puis a all_movies en cas de succes."""
        result = await self._client.add_movie(movie)
        if isinstance(result, Ok):
            self._store.all_movies.update(lambda movies: [*movies, movie])
            self._refilter_movies()
            logger.info("Film ajoute", tmdb_id=movie.tmdb_id, title=movie.title)
        return result

    async def delete_movie(self, tmdb_id: int) -> ApiResult[None]:
        """Supprime un film du service, puis de all_movies en cas de succes."""
        result = await self._client.delete_movie(tmdb_id)
        if isinstance(result, Ok):
            self._store.all_movies.update(
                lambda movies: [m for m in movies if m.tmdb_id != tmdb_id]
            )
            self._refilter_movies()
            logger.info("Film supprime", tmdb_id=tmdb_id)
        return result

    async def add_rating(self, tmdb_id: int, rating: Rating) -> ApiResult[None]:
        """
        Ajoute une note a un film.

        En cas de succes, la note est inseree a sa place (ordre des dates)
        dans la copie locale du film.
        """
        result = await self._client.add_rating(tmdb_id, rating)
        if isinstance(result, Ok):
            self._store.all_movies.update(
                lambda movies: [
                    _with_rating(m, rating) if m.tmdb_id == tmdb_id else m for m in movies
                ]
            )
            self._refilter_movies()
        return result

    async def create_tag(self, tag: Tag) -> ApiResult[Tag]:
        """Cree un tag et l'ajoute a l'index avec l'ID attribue par le service."""
        result = await self._client.create_tag(tag)
        if isinstance(result, Ok) and isinstance(result.value, Tag):
            created = result.value
            self._store.tags.update(lambda tags: {**tags, created.id: created})
            logger.info("Tag cree", tag_id=created.id, name=created.name)
        return result

    # Theme

    def sync_dark_theme(self, system_prefers_dark: bool) -> bool:
        """Recalcule dark_theme a partir de color_scheme et du systeme."""
        dark = resolve_dark_theme(self._store.color_scheme.get(), system_prefers_dark)
        self._store.dark_theme.set(dark)
        return dark

    def find_movie(self, tmdb_id: int) -> Optional[Movie]:
        return next((m for m in self._store.all_movies.get() if m.tmdb_id == tmdb_id), None)


def _with_rating(movie: Movie, rating: Rating) -> Movie:
    ratings = list(movie.ratings)
    dates = [r.date for r in ratings]
    ratings.insert(bisect.bisect_left(dates, rating.date), rating)
    return replace(movie, ratings=ratings)
