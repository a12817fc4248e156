"""
Interfaces ports pour le client du service de bibliotheque.

Definit le type resultat des appels API (Ok / Err) et le contrat abstrait
du client. L'implementation HTTP se trouve dans adapters/api/.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from mediatrack.core.entities import (
    Book,
    BookEdition,
    BookStub,
    Movie,
    MovieStub,
    Rating,
    Tag,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Resultat d'un appel reussi.

    Attributs :
        value : Valeur decodee, ou None si aucun corps n'etait attendu
    """

    value: T


@dataclass(frozen=True)
class Err:
    """
    Resultat d'un appel en echec.

    Attributs :
        message : Message d'erreur affichable tel quel
    """

    message: str

    def __str__(self) -> str:
        return self.message


ApiResult = Union[Ok[T], Err]


class ILibraryAPIClient(ABC):
    """
    Interface du client du service de bibliotheque.

    Chaque operation effectue un seul aller-retour et renvoie un ApiResult :
    Ok avec la valeur decodee, ou Err avec le message d'erreur formate.
    """

    @abstractmethod
    async def get_movies(self) -> ApiResult[dict[int, Movie]]:
        """Recupere tous les films, indexes par ID TMDB."""
        ...

    @abstractmethod
    async def get_movie(self, tmdb_id: int) -> ApiResult[Movie]:
        ...

    @abstractmethod
    async def add_movie(self, movie: Movie) -> ApiResult[None]:
        ...

    @abstractmethod
    async def update_movie(self, movie: Movie) -> ApiResult[None]:
        ...

    @abstractmethod
    async def delete_movie(self, tmdb_id: int) -> ApiResult[None]:
        ...

    @abstractmethod
    async def add_rating(self, tmdb_id: int, rating: Rating) -> ApiResult[None]:
        """Ajoute une note a un film (une seule note par date)."""
        ...

    @abstractmethod
    async def get_tags(self) -> ApiResult[dict[int, Tag]]:
        """Recupere tous les tags, indexes par ID."""
        ...

    @abstractmethod
    async def create_tag(self, tag: Tag) -> ApiResult[Tag]:
        """Cree un tag. Le service attribue l'ID et renvoie le tag cree."""
        ...

    @abstractmethod
    async def update_tag(self, tag: Tag) -> ApiResult[None]:
        ...

    @abstractmethod
    async def get_books(self) -> ApiResult[dict[str, Book]]:
        """Recupere tous les livres, indexes par OLID."""
        ...

    @abstractmethod
    async def get_book(self, olid: str) -> ApiResult[Book]:
        ...

    @abstractmethod
    async def search_movies(self, title: str) -> ApiResult[list[MovieStub]]:
        ...

    @abstractmethod
    async def movie_by_id(self, movie_id: str) -> ApiResult[Movie]:
        """Recupere un film par ID TMDB ou ID IMDb (prefixe "tt")."""
        ...

    @abstractmethod
    async def search_books(self, title: str) -> ApiResult[list[BookStub]]:
        ...

    @abstractmethod
    async def book_editions(self, work: str) -> ApiResult[list[BookEdition]]:
        ...

    @abstractmethod
    async def upload_cover(
        self, cover_id: int, content: bytes, filename: str = "cover.jpg"
    ) -> ApiResult[None]:
        """Remplace la grande couverture stockee par le service."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
