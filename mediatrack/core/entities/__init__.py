"""
Business entities representing core domain concepts.

Exports:
- Tag: User-defined tag, referenced by id
- Movie / Rating: Tracked movie and its ratings
- Book / Reading: Tracked book and its read-throughs
- MovieStub / BookStub / BookEdition: Search projections
"""

from mediatrack.core.entities.library import Book, Movie, Rating, Reading, Tag
from mediatrack.core.entities.stubs import BookEdition, BookStub, MovieStub

__all__ = [
    "Tag",
    "Movie",
    "Rating",
    "Book",
    "Reading",
    "MovieStub",
    "BookStub",
    "BookEdition",
]
