"""
Commandes CLI de consultation de la bibliotheque (movies, books, tags, search).

Chaque commande charge les donnees via LibraryService dans un LibraryStore
neuf, puis affiche la vue filtree sous forme de tableau Rich.
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from mediatrack.adapters.cli.helpers import console, exit_on_error, with_container
from mediatrack.core.entities import Book, BookStub, Movie, MovieStub, Tag
from mediatrack.core.value_objects import Duration
from mediatrack.services.library import BookFilter, MovieFilter
from mediatrack.services.store import LibraryStore
from mediatrack.utils.helpers import book_rating_average, entities_of, movie_rating_average


def format_runtime(runtime: Duration) -> str:
    """Formate une duree en "2h 28min" (ou "-" si inconnue)."""
    if runtime.secs <= 0:
        return "-"
    hours, minutes = divmod(runtime.minutes, 60)
    return f"{hours}h {minutes:02d}min" if hours else f"{minutes}min"


def format_color(color: tuple[int, int, int]) -> str:
    """Formate un triplet RGB en notation hexadecimale (#rrggbb)."""
    return "#{:02x}{:02x}{:02x}".format(*color)


def _tag_names(store: LibraryStore, tag_ids: list[int]) -> str:
    # Les IDs inconnus (tags supprimes) sont ignores
    return ", ".join(tag.name for tag in store.resolve_tags(tag_ids))


def _render_movies(store: LibraryStore, movies: list[Movie]) -> Table:
    table = Table(title=f"Films ({len(movies)})", show_header=True)
    table.add_column("Titre", style="cyan")
    table.add_column("Sortie")
    table.add_column("Duree", justify="right")
    table.add_column("Note", justify="right")
    table.add_column("Tags", style="dim")

    for movie in movies:
        average = f"{movie_rating_average(movie):.2f}" if movie.ratings else "-"
        table.add_row(
            movie.title,
            movie.release_date,
            format_runtime(movie.runtime),
            average,
            _tag_names(store, movie.tags),
        )
    return table


def _render_books(store: LibraryStore, books: list[Book]) -> Table:
    table = Table(title=f"Livres ({len(books)})", show_header=True)
    table.add_column("Titre", style="cyan")
    table.add_column("Auteurs")
    table.add_column("Pages", justify="right")
    table.add_column("Lectures", justify="right")
    table.add_column("Note", justify="right")
    table.add_column("Tags", style="dim")

    for book in books:
        rated = any(reading.rating is not None for reading in book.readings)
        table.add_row(
            book.title,
            ", ".join(book.authors),
            str(book.page_count),
            str(len(book.readings)),
            f"{book_rating_average(book):.2f}" if rated else "-",
            _tag_names(store, book.tags),
        )
    return table


def _render_tags(tags: dict[int, Tag]) -> Table:
    table = Table(title=f"Tags ({len(tags)})", show_header=True)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Nom", style="cyan")
    table.add_column("Couleur")
    table.add_column("Icone")

    for tag in sorted(tags.values(), key=lambda t: t.name.lower()):
        table.add_row(str(tag.id), tag.name, format_color(tag.color), tag.icon or "")
    return table


def _render_movie_stubs(stubs: list[MovieStub]) -> Table:
    table = Table(title="Resultats TMDB", show_header=True)
    table.add_column("ID TMDB", justify="right", style="dim")
    table.add_column("Titre", style="cyan")
    table.add_column("Sortie")
    for stub in stubs:
        table.add_row(str(stub.tmdb_id), stub.title, stub.release_date)
    return table


def _render_book_stubs(stubs: list[BookStub]) -> Table:
    table = Table(title="Resultats Open Library", show_header=True)
    table.add_column("Oeuvre", style="dim")
    table.add_column("Titre", style="cyan")
    table.add_column("Auteurs")
    table.add_column("Annee", justify="right")
    for stub in stubs:
        year = str(stub.first_publish_year) if stub.first_publish_year else ""
        table.add_row(stub.key.id, stub.title, ", ".join(stub.author_name), year)
    return table


def movies(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Texte recherche dans le titre"),
    ] = "",
    seen: Annotated[
        bool,
        typer.Option("--seen/--no-seen", help="Inclure les films deja notes"),
    ] = False,
    unseen: Annotated[
        bool,
        typer.Option("--unseen/--no-unseen", help="Inclure les films sans note"),
    ] = True,
) -> None:
    """
    Liste les films de la bibliotheque.

    Exemples:
      mediatrack movies                       # Films pas encore vus
      mediatrack movies --seen --no-unseen    # Films deja notes
      mediatrack movies -s alien --seen       # Recherche dans tous les films
    """
    asyncio.run(_movies_async(MovieFilter(show_seen=seen, show_unseen=unseen, search=search)))


@with_container
async def _movies_async(container, movie_filter: MovieFilter) -> None:
    """Implementation async de la commande movies."""
    service = container.library_service()
    movies_result, tags_result = await asyncio.gather(
        service.refresh_movies(), service.refresh_tags()
    )
    exit_on_error(movies_result, tags_result)

    filtered = service.apply_movie_filter(movie_filter)
    console.print(_render_movies(service.store, filtered))


def books(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Texte recherche dans le titre ou les auteurs"),
    ] = "",
) -> None:
    """Liste les livres de la bibliotheque."""
    asyncio.run(_books_async(BookFilter(search=search)))


@with_container
async def _books_async(container, book_filter: BookFilter) -> None:
    """Implementation async de la commande books."""
    service = container.library_service()
    books_result, tags_result = await asyncio.gather(
        service.refresh_books(), service.refresh_tags()
    )
    exit_on_error(books_result, tags_result)

    filtered = service.apply_book_filter(book_filter)
    console.print(_render_books(service.store, filtered))


def tags() -> None:
    """Liste les tags."""
    asyncio.run(_tags_async())


@with_container
async def _tags_async(container) -> None:
    service = container.library_service()
    result = await service.refresh_tags()
    exit_on_error(result)
    console.print(_render_tags(service.store.tags.get()))


def search(
    title: Annotated[str, typer.Argument(help="Titre a rechercher")],
    book: Annotated[
        bool,
        typer.Option("--book", "-b", help="Rechercher un livre (Open Library) au lieu d'un film"),
    ] = False,
) -> None:
    """
    Recherche un film sur TMDB ou un livre sur Open Library.

    Exemples:
      mediatrack search "Blade Runner"
      mediatrack search Dune --book
    """
    asyncio.run(_search_async(title, book))


@with_container
async def _search_async(container, title: str, book: bool) -> None:
    """Implementation async de la commande search."""
    client = container.api_client()
    if book:
        result = await client.search_books(title)
        exit_on_error(result)
        console.print(_render_book_stubs(entities_of(result.value, BookStub)))
    else:
        result = await client.search_movies(title)
        exit_on_error(result)
        console.print(_render_movie_stubs(entities_of(result.value, MovieStub)))
