"""
Library entities.

Entities representing the user's tracked movies and books, as exchanged
with the library service. Identifiers are assigned by the service and are
never modified locally.

Tag references (``tags`` fields) are weak: the referenced Tag may have been
deleted server-side, so resolution must tolerate unknown ids.
"""

from dataclasses import dataclass, field
from typing import Optional

from mediatrack.core.value_objects.library import Duration, Platform


@dataclass
class Tag:
    """
    User-defined tag attached to movies, books and ratings.

    Attributes:
        id: Service-assigned identifier
        name: Display name
        color: RGB triple, each component in 0-255
        icon: Optional icon name, None for no icon
    """

    id: int
    name: str
    color: tuple[int, int, int] = (0, 0, 0)
    icon: Optional[str] = None


@dataclass
class Rating:
    """
    A single evaluation of a movie viewing or a finished reading.

    Attributes:
        date: Calendar date (YYYY-MM-DD)
        rating: Score given by the user
        speed: Playback speed multiplier (1.0 when not recorded)
        platform: Where the movie was watched, if known
        tags: Tag id references
    """

    date: str
    rating: int
    speed: float = 1.0
    platform: Optional[Platform] = None
    tags: list[int] = field(default_factory=list)


@dataclass
class Movie:
    """
    Movie tracked in the library.

    Attributes:
        tmdb_id: The Movie Database ID (primary identity)
        imdb_id: Numeric IMDb ID (without the "tt" prefix)
        title: Title
        description: Plot summary
        ratings: Ratings in date order, owned by the movie
        tags: Tag id references
        platforms: Platforms the movie is available on
        poster: Poster path on the service
        release_date: Release date (YYYY-MM-DD)
        runtime: Runtime
        score: Externally supplied score
    """

    tmdb_id: int
    title: str
    description: str = ""
    imdb_id: Optional[int] = None
    ratings: list[Rating] = field(default_factory=list)
    tags: list[int] = field(default_factory=list)
    platforms: list[Platform] = field(default_factory=list)
    poster: Optional[str] = None
    release_date: str = ""
    runtime: Duration = field(default_factory=Duration)
    score: float = 0.0

    @property
    def seen(self) -> bool:
        """A movie counts as seen once it has at least one rating."""
        return bool(self.ratings)


@dataclass
class Reading:
    """
    One read-through of a book.

    Attributes:
        pages_read: Pages read per day, keyed by ISO date (YYYY-MM-DD)
        rating: Evaluation, present once the reading is complete
    """

    pages_read: dict[str, int] = field(default_factory=dict)
    rating: Optional[Rating] = None

    @property
    def total_pages(self) -> int:
        return sum(self.pages_read.values())


@dataclass
class Book:
    """
    Book tracked in the library.

    ``isbn`` is stored as a string. Older payloads send it as a number;
    those are converted on decode (see ``__pydantic_config__``).

    Attributes:
        olid: Open Library edition ID (primary identity)
        isbn: ISBN of the edition
        title: Title
        description: Description
        authors: Author names, in catalog order
        readings: Read-throughs, owned by the book
        tags: Tag id references
        release_date: Publication date as free text
        start_page: First counted page
        end_page: Last counted page
        score: Score, None when not yet rated
    """

    __pydantic_config__ = {"coerce_numbers_to_str": True}

    olid: str
    title: str
    isbn: str = ""
    description: str = ""
    authors: list[str] = field(default_factory=list)
    readings: list[Reading] = field(default_factory=list)
    tags: list[int] = field(default_factory=list)
    release_date: str = ""
    start_page: int = 0
    end_page: int = 0
    score: Optional[float] = None

    @property
    def page_count(self) -> int:
        return max(self.end_page - self.start_page, 0)
