"""
Client HTTP du service de bibliotheque (films, livres, tags).

Implemente l'interface ILibraryAPIClient. Chaque methode emet une seule
requete et la passe a execute(), qui renvoie Ok ou Err : aucune exception
n'est levee pour un statut HTTP en echec.

Usage:
    client = LibraryAPIClient(base_url="http://localhost:19283")
    result = await client.get_movies()
    if isinstance(result, Ok):
        for movie in result.value.values():
            print(movie.title)
    await client.close()
"""

from typing import Optional

import httpx

from mediatrack.adapters.api.request_executor import encode, execute
from mediatrack.core.entities import (
    Book,
    BookEdition,
    BookStub,
    Movie,
    MovieStub,
    Rating,
    Tag,
)
from mediatrack.core.ports.api_clients import ApiResult, ILibraryAPIClient, Ok


class LibraryAPIClient(ILibraryAPIClient):
    """
    Client API du service de bibliotheque.

    Implemente ILibraryAPIClient avec:
    - Lecture et modification des films, de leurs notes et des tags
    - Lecture des livres
    - Recherche TMDB (films) et Open Library (livres) via le service

    Attributes:
        API_PREFIX: Prefixe commun des routes du service

    Example:
        client = LibraryAPIClient(base_url="http://localhost:19283")

        result = await client.search_movies("Inception")
        match result:
            case Ok(stubs):
                print([stub.title for stub in stubs])
            case Err(message):
                print(message)

        await client.close()
    """

    API_PREFIX = "/api"

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL racine du service (ex: http://localhost:19283)
            timeout: Timeout des requetes en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure pour le service
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=f"{self._base_url}{self.API_PREFIX}",
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    def poster_url(self, path: Optional[str], big: bool = True) -> Optional[str]:
        """
        Construit l'URL d'un poster servi par le service.

        Args:
            path: Chemin du poster (Movie.poster), ex: "/abc.jpg"
            big: Version grande (True) ou miniature (False)

        Returns:
            URL complete, ou None si le film n'a pas de poster
        """
        if not path:
            return None
        size = "big" if big else "small"
        return f"{self._base_url}{self.API_PREFIX}/posters/{size}{path}"

    def cover_url(self, cover_id: int, olid: Optional[str] = None, big: bool = True) -> str:
        """
        Construit l'URL d'une couverture de livre servie par le service.

        Args:
            cover_id: Identifiant numerique de la couverture
            olid: Edition Open Library, permet au service de telecharger
                la couverture si elle n'est pas encore stockee
            big: Version grande (True) ou miniature (False)
        """
        size = "big" if big else "small"
        url = httpx.URL(f"{self._base_url}{self.API_PREFIX}/covers/{size}/{cover_id}")
        if olid:
            url = url.copy_merge_params({"olid": olid})
        return str(url)

    # Films

    async def get_movies(self) -> ApiResult[dict[int, Movie]]:
        return await execute(self._get_client().get("/movie"), dict[int, Movie])

    async def get_movie(self, tmdb_id: int) -> ApiResult[Movie]:
        return await execute(self._get_client().get(f"/movie/{tmdb_id}"), Movie)

    async def add_movie(self, movie: Movie) -> ApiResult[None]:
        """Ajoute un film. Le service repond 409 si l'ID TMDB existe deja."""
        return await execute(
            self._get_client().post("/movie", json=encode(movie)),
            expects_body=False,
        )

    async def update_movie(self, movie: Movie) -> ApiResult[None]:
        """Remplace un film existant. Le service repond 404 s'il est inconnu."""
        return await execute(
            self._get_client().patch("/movie", json=encode(movie)),
            expects_body=False,
        )

    async def delete_movie(self, tmdb_id: int) -> ApiResult[None]:
        return await execute(
            self._get_client().delete(f"/movie/{tmdb_id}"),
            expects_body=False,
        )

    async def add_rating(self, tmdb_id: int, rating: Rating) -> ApiResult[None]:
        """
        Ajoute une note a un film.

        Le service insere la note dans l'ordre des dates et repond 409
        si une note existe deja pour cette date.
        """
        return await execute(
            self._get_client().put(f"/movie/{tmdb_id}/rating", json=encode(rating)),
            expects_body=False,
        )

    # Tags

    async def get_tags(self) -> ApiResult[dict[int, Tag]]:
        return await execute(self._get_client().get("/tag"), dict[int, Tag])

    async def create_tag(self, tag: Tag) -> ApiResult[Tag]:
        """Cree un tag. L'ID envoye est ignore, le service en attribue un."""
        return await execute(self._get_client().post("/tag", json=encode(tag)), Tag)

    async def update_tag(self, tag: Tag) -> ApiResult[None]:
        return await execute(
            self._get_client().patch("/tag", json=encode(tag)),
            expects_body=False,
        )

    # Livres

    async def get_books(self) -> ApiResult[dict[str, Book]]:
        return await execute(self._get_client().get("/book"), dict[str, Book])

    async def get_book(self, olid: str) -> ApiResult[Book]:
        return await execute(self._get_client().get(f"/book/{olid}"), Book)

    # Recherche

    async def search_movies(self, title: str) -> ApiResult[list[MovieStub]]:
        """
        Recherche des films sur TMDB via le service.

        Un titre vide renvoie une liste vide sans appel reseau.
        """
        if not title.strip():
            return Ok([])
        return await execute(
            self._get_client().get("/tmdb/search", params={"title": title}),
            list[MovieStub],
        )

    async def movie_by_id(self, movie_id: str) -> ApiResult[Movie]:
        """
        Recupere la fiche TMDB complete d'un film.

        Args:
            movie_id: ID TMDB ("19995") ou ID IMDb ("tt0499549")

        Returns:
            Ok(Movie) sans notes ni tags, pret a etre ajoute
        """
        return await execute(
            self._get_client().get("/tmdb/by_id", params={"id": movie_id}),
            Movie,
        )

    async def search_books(self, title: str) -> ApiResult[list[BookStub]]:
        """
        Recherche des oeuvres sur Open Library via le service.

        Un titre vide renvoie une liste vide sans appel reseau.
        """
        if not title.strip():
            return Ok([])
        return await execute(
            self._get_client().get("/openlib/search", params={"title": title}),
            list[BookStub],
        )

    async def book_editions(self, work: str) -> ApiResult[list[BookEdition]]:
        """
        Liste les editions d'une oeuvre Open Library.

        Args:
            work: OLID de l'oeuvre (ex: "OL45804W")
        """
        return await execute(
            self._get_client().get("/openlib/editions", params={"work": work}),
            list[BookEdition],
        )

    # Couvertures

    async def upload_cover(
        self, cover_id: int, content: bytes, filename: str = "cover.jpg"
    ) -> ApiResult[None]:
        """
        Envoie une image comme grande couverture (formulaire multipart).

        Le service limite le fichier a 100 KB et repond 503 s'il ne peut
        pas l'enregistrer.
        """
        return await execute(
            self._get_client().post(
                f"/covers/big/{cover_id}",
                files={"file": (filename, content, "image/jpeg")},
            ),
            expects_body=False,
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
