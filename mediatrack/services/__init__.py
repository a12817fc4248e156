"""
Application services layer (use cases).

This layer contains:
- LibraryStore / Writable: observable in-memory state of the library
- LibraryService: loads the library into the store and applies filters

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

from mediatrack.services.library import BookFilter, LibraryService, MovieFilter
from mediatrack.services.store import LibraryStore, Writable

__all__ = [
    "BookFilter",
    "LibraryService",
    "LibraryStore",
    "MovieFilter",
    "Writable",
]
