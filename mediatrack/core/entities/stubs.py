"""
Projections reduites des entites, utilisees pour la recherche.

Les stubs sont renvoyes par les recherches TMDB et Open Library avant
que l'entite complete ne soit recuperee et ajoutee a la bibliotheque.
"""

from dataclasses import dataclass, field
from typing import Optional

from mediatrack.core.value_objects.library import Key


@dataclass
class MovieStub:
    """
    Resultat de recherche de film (TMDB).

    Attributs :
        tmdb_id : ID TMDB du film
        title : Titre
        description : Resume
        poster : Chemin du poster, si disponible
        release_date : Date de sortie (YYYY-MM-DD)
    """

    tmdb_id: int
    title: str
    description: str = ""
    poster: Optional[str] = None
    release_date: str = ""


@dataclass
class BookStub:
    """
    Resultat de recherche de livre (Open Library, niveau oeuvre).

    Attributs :
        key : Cle de l'oeuvre (ex: /works/OL45804W)
        cover_edition_key : Edition servant de couverture
        edition_count : Nombre d'editions connues
        title : Titre
        author_name : Noms des auteurs
        first_publish_year : Annee de premiere publication
        ratings_average : Note moyenne Open Library
    """

    key: Key
    title: str
    cover_edition_key: Optional[str] = None
    edition_count: int = 0
    author_name: list[str] = field(default_factory=list)
    first_publish_year: Optional[int] = None
    ratings_average: Optional[float] = None


@dataclass
class BookEdition:
    """
    Edition d'une oeuvre Open Library.

    Attributs :
        key : Cle de l'edition (ex: /books/OL7353617M)
        isbn_13 : ISBN-13 connus
        isbn_10 : ISBN-10 connus
        title : Titre de l'edition
        description : Description, si renseignee
        authors : References vers les auteurs
        publish_date : Date de publication (texte libre)
    """

    key: Key
    title: str
    isbn_13: list[str] = field(default_factory=list)
    isbn_10: list[str] = field(default_factory=list)
    description: Optional[str] = None
    authors: list[Key] = field(default_factory=list)
    publish_date: str = ""

    @property
    def isbn(self) -> Optional[str]:
        """ISBN prefere de l'edition (ISBN-13 en priorite)."""
        if self.isbn_13:
            return self.isbn_13[0]
        if self.isbn_10:
            return self.isbn_10[0]
        return None
