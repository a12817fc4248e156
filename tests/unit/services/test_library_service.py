"""
Tests pour LibraryService.

Le client est un AsyncMock de ILibraryAPIClient : les tests verifient
l'ecriture des resultats dans le LibraryStore, le drapeau fetching et
le recalcul des vues filtrees.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from mediatrack.core.entities import Book, Movie, Rating, Reading, Tag
from mediatrack.core.ports.api_clients import Err, ILibraryAPIClient, Ok
from mediatrack.core.value_objects import SchemeKind
from mediatrack.services.library import BookFilter, LibraryService, MovieFilter
from mediatrack.services.store import LibraryStore


@pytest.fixture
def alien() -> Movie:
    return Movie(tmdb_id=348, title="Alien")


@pytest.fixture
def blade_runner() -> Movie:
    return Movie(
        tmdb_id=78,
        title="Blade Runner",
        ratings=[
            Rating(date="2023-02-11", rating=8),
            Rating(date="2024-06-01", rating=9),
        ],
    )


@pytest.fixture
def dune() -> Book:
    return Book(
        olid="OL7353617M",
        title="Dune",
        authors=["Frank Herbert"],
        readings=[Reading(rating=Rating(date="2024-01-20", rating=9))],
    )


@pytest.fixture
def hail_mary() -> Book:
    return Book(olid="OL26331930M", title="Project Hail Mary", authors=["Andy Weir"])


@pytest.fixture
def mock_client(alien, blade_runner, dune, hail_mary) -> AsyncMock:
    """Client qui repond avec succes a tous les chargements."""
    client = AsyncMock(spec=ILibraryAPIClient)
    client.get_movies.return_value = Ok({78: blade_runner, 348: alien})
    client.get_tags.return_value = Ok({1: Tag(id=1, name="Action")})
    client.get_books.return_value = Ok({dune.olid: dune, hail_mary.olid: hail_mary})
    return client


@pytest.fixture
def service(mock_client: AsyncMock) -> LibraryService:
    return LibraryService(client=mock_client, store=LibraryStore())


class TestRefresh:
    """Tests pour le chargement de la bibliotheque."""

    @pytest.mark.asyncio
    async def test_refresh_movies_fills_store(self, service, alien, blade_runner):
        result = await service.refresh_movies()

        assert result == Ok([blade_runner, alien])
        assert service.store.all_movies.get() == [blade_runner, alien]
        # Filtre par defaut : films non vus uniquement
        assert service.store.filtered_movies.get() == [alien]

    @pytest.mark.asyncio
    async def test_refresh_error_leaves_store_untouched(self, service, mock_client):
        mock_client.get_movies.return_value = Err("Server responded with 500 (Internal Server Error): ")

        result = await service.refresh_movies()

        assert isinstance(result, Err)
        assert service.store.all_movies.get() == []

    @pytest.mark.asyncio
    async def test_refresh_tags(self, service):
        await service.refresh_tags()

        assert service.store.resolve_tag(1).name == "Action"

    @pytest.mark.asyncio
    async def test_refresh_books(self, service, dune, hail_mary):
        await service.refresh_books()

        assert service.store.filtered_books.get() == [dune, hail_mary]

    @pytest.mark.asyncio
    async def test_refresh_all_toggles_fetching(self, service):
        seen = []
        service.store.fetching.subscribe(seen.append)

        errors = await service.refresh_all()

        assert errors == []
        assert seen == [False, True, False]

    @pytest.mark.asyncio
    async def test_refresh_all_collects_errors(self, service, mock_client):
        mock_client.get_tags.return_value = Err("Request failed: connection refused")

        errors = await service.refresh_all()

        assert errors == ["Request failed: connection refused"]
        assert service.store.fetching.get() is False
        assert len(service.store.all_movies.get()) == 2

    @pytest.mark.asyncio
    async def test_fetching_reset_when_call_raises(self, service, mock_client):
        mock_client.get_books.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await service.refresh_all()

        assert service.store.fetching.get() is False

    @pytest.mark.asyncio
    async def test_refresh_all_with_undecoded_bodies(self, service, mock_client):
        """Des corps bruts (non decodes) ne levent pas et laissent le store vide."""
        mock_client.get_movies.return_value = Ok({"78": {"tmdb_id": 78}})
        mock_client.get_tags.return_value = Ok("<html>maintenance</html>")
        mock_client.get_books.return_value = Ok(None)

        errors = await service.refresh_all()

        assert errors == []
        assert service.store.all_movies.get() == []
        assert service.store.filtered_movies.get() == []
        assert service.store.tags.get() == {}
        assert service.store.all_books.get() == []
        assert service.store.fetching.get() is False

    @pytest.mark.asyncio
    async def test_refresh_movies_keeps_decoded_entries(self, service, mock_client, alien):
        mock_client.get_movies.return_value = Ok({348: alien, 1: {"title": "?"}})

        result = await service.refresh_movies()

        assert result == Ok([alien])

    @pytest.mark.asyncio
    async def test_concurrent_refresh_last_write_wins(self, service, mock_client, alien):
        """Deux chargements concurrents : le dernier a se terminer l'emporte."""
        second_done = asyncio.Event()
        calls = []

        async def get_movies():
            calls.append(None)
            if len(calls) == 1:
                await second_done.wait()
                return Ok({348: alien})
            second_done.set()
            return Ok({})

        mock_client.get_movies.side_effect = get_movies

        await asyncio.gather(service.refresh_movies(), service.refresh_movies())

        assert service.store.all_movies.get() == [alien]


class TestFilters:
    """Tests pour les filtres de films et de livres."""

    @pytest.mark.asyncio
    async def test_apply_movie_filter_seen(self, service, blade_runner):
        await service.refresh_movies()

        result = service.apply_movie_filter(MovieFilter(show_seen=True, show_unseen=False))

        assert result == [blade_runner]
        assert service.store.filtered_movies.get() == [blade_runner]
        assert service.movie_filter.show_seen

    @pytest.mark.asyncio
    async def test_movie_filter_search_and_sort(self, service, alien, blade_runner):
        await service.refresh_movies()

        result = service.apply_movie_filter(MovieFilter(show_seen=True, search="E"))

        assert result == [alien, blade_runner]

    @pytest.mark.asyncio
    async def test_filter_kept_after_refresh(self, service, blade_runner):
        service.apply_movie_filter(MovieFilter(show_seen=True, show_unseen=False))

        await service.refresh_movies()

        assert service.store.filtered_movies.get() == [blade_runner]

    def test_movie_filter_hides_everything(self, alien, blade_runner):
        movie_filter = MovieFilter(show_seen=False, show_unseen=False)
        assert movie_filter.apply([alien, blade_runner]) == []

    def test_book_filter_by_author(self, dune, hail_mary):
        assert BookFilter(search="weir").apply([dune, hail_mary]) == [hail_mary]

    def test_book_filter_read_only(self, dune, hail_mary):
        assert BookFilter(show_unread=False).apply([hail_mary, dune]) == [dune]

    @pytest.mark.asyncio
    async def test_apply_book_filter(self, service, dune):
        await service.refresh_books()

        service.apply_book_filter(BookFilter(search="dune"))

        assert service.store.filtered_books.get() == [dune]


class TestModifications:
    """Tests pour les operations d'ecriture."""

    @pytest.mark.asyncio
    async def test_add_movie_appends_on_success(self, service, mock_client, alien):
        mock_client.add_movie.return_value = Ok(None)

        result = await service.add_movie(alien)

        assert result == Ok(None)
        assert service.store.all_movies.get() == [alien]
        assert service.store.filtered_movies.get() == [alien]
        mock_client.add_movie.assert_awaited_once_with(alien)

    @pytest.mark.asyncio
    async def test_add_movie_conflict_not_added(self, service, mock_client, alien):
        mock_client.add_movie.return_value = Err(
            "Server responded with 409 (Conflict): a movie with that ID is already present"
        )

        result = await service.add_movie(alien)

        assert isinstance(result, Err)
        assert service.store.all_movies.get() == []

    @pytest.mark.asyncio
    async def test_delete_movie(self, service, mock_client, blade_runner):
        mock_client.delete_movie.return_value = Ok(None)
        await service.refresh_movies()

        await service.delete_movie(348)

        assert service.store.all_movies.get() == [blade_runner]
        assert service.find_movie(348) is None

    @pytest.mark.asyncio
    async def test_add_rating_inserted_in_date_order(self, service, mock_client):
        mock_client.add_rating.return_value = Ok(None)
        await service.refresh_movies()
        rating = Rating(date="2023-12-24", rating=10)

        await service.add_rating(78, rating)

        dates = [r.date for r in service.find_movie(78).ratings]
        assert dates == ["2023-02-11", "2023-12-24", "2024-06-01"]

    @pytest.mark.asyncio
    async def test_add_rating_moves_movie_to_seen(self, service, mock_client, alien):
        mock_client.add_rating.return_value = Ok(None)
        await service.refresh_movies()
        assert service.store.filtered_movies.get() == [alien]

        await service.add_rating(348, Rating(date="2024-08-01", rating=7))

        assert service.store.filtered_movies.get() == []

    @pytest.mark.asyncio
    async def test_create_tag_indexes_assigned_id(self, service, mock_client):
        created = Tag(id=99, name="Noir")
        mock_client.create_tag.return_value = Ok(created)

        await service.create_tag(Tag(id=0, name="Noir"))

        assert service.store.resolve_tag(99) == created
        assert service.store.resolve_tag(0) is None

    @pytest.mark.asyncio
    async def test_create_tag_undecoded_body_not_indexed(self, service, mock_client):
        mock_client.create_tag.return_value = Ok({"name": "Noir"})

        result = await service.create_tag(Tag(id=0, name="Noir"))

        assert isinstance(result, Ok)
        assert service.store.tags.get() == {}


class TestTheme:
    """Tests pour la synchronisation du theme."""

    def test_sync_dark_theme_follows_system(self, service):
        assert service.sync_dark_theme(system_prefers_dark=True) is True
        assert service.store.dark_theme.get() is True

    def test_sync_dark_theme_forced_light(self, service):
        service.store.color_scheme.set(SchemeKind.LIGHT)
        assert service.sync_dark_theme(system_prefers_dark=True) is False
        assert service.store.dark_theme.get() is False
