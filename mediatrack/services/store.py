"""
Conteneurs reactifs portant la vue courante de la bibliotheque.

Un Writable est une cellule mutable observable :
- set() remplace la valeur et notifie les abonnes de facon synchrone
- subscribe() livre immediatement la valeur courante au nouvel abonne
  et renvoie une fonction de desabonnement

LibraryStore regroupe les cellules de l'application. Il est cree une fois
par le contexte de l'application (voir container.py) et passe aux
consommateurs, plutot que d'exister sous forme de globales de module.
Aucune coherence entre cellules n'est garantie ici : recalculer
filtered_movies apres un changement de all_movies est la responsabilite
de l'appelant (voir services/library.py).
"""

from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

from mediatrack.core.entities import Book, Movie, Tag
from mediatrack.core.value_objects import SchemeKind

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscriber = Callable[[], None]

# Valeurs immuables comparees par egalite : set() avec une valeur egale
# ne notifie pas. Les listes, dicts et objets notifient toujours.
_SCALAR_TYPES = (type(None), bool, int, float, str, Enum)


def _is_unchanged(old: object, new: object) -> bool:
    return isinstance(new, _SCALAR_TYPES) and type(old) is type(new) and old == new


class Writable(Generic[T]):
    """
    Cellule observable contenant une valeur.

    Example:
        fetching = Writable(False)
        unsubscribe = fetching.subscribe(lambda value: print("fetching:", value))
        # affiche "fetching: False"
        fetching.set(True)
        # affiche "fetching: True"
        unsubscribe()
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber[T]] = []

    def get(self) -> T:
        """Retourne la valeur courante sans s'abonner."""
        return self._value

    def set(self, value: T) -> None:
        """Remplace la valeur et notifie les abonnes courants."""
        if _is_unchanged(self._value, value):
            return
        self._value = value
        # Copie : un abonne peut se desabonner pendant la notification
        for subscriber in list(self._subscribers):
            subscriber(value)

    def update(self, updater: Callable[[T], T]) -> None:
        """Remplace la valeur par updater(valeur courante)."""
        self.set(updater(self._value))

    def subscribe(self, subscriber: Subscriber[T]) -> Unsubscriber:
        """
        Abonne un callback aux changements de valeur.

        Le callback recoit immediatement la valeur courante, puis chaque
        nouvelle valeur.

        Returns:
            Fonction de desabonnement (peut etre appelee plusieurs fois)
        """
        self._subscribers.append(subscriber)
        subscriber(self._value)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"Writable({self._value!r})"


class LibraryStore:
    """
    Etat en memoire de la bibliotheque.

    Attributes:
        color_scheme: Preference de theme (SYSTEM par defaut)
        dark_theme: Theme sombre resolu, synchronise par l'appelant
        tags: Index des tags par ID, reference pour la resolution
        all_movies: Tous les films recuperes
        filtered_movies: Vue filtree des films (recalculee par l'appelant)
        all_books: Tous les livres recuperes
        filtered_books: Vue filtree des livres (recalculee par l'appelant)
        fetching: True tant qu'un chargement est en cours
    """

    def __init__(self) -> None:
        self.color_scheme: Writable[SchemeKind] = Writable(SchemeKind.SYSTEM)
        self.dark_theme: Writable[bool] = Writable(False)
        self.tags: Writable[dict[int, Tag]] = Writable({})
        self.all_movies: Writable[list[Movie]] = Writable([])
        self.filtered_movies: Writable[list[Movie]] = Writable([])
        self.all_books: Writable[list[Book]] = Writable([])
        self.filtered_books: Writable[list[Book]] = Writable([])
        self.fetching: Writable[bool] = Writable(False)

    def resolve_tag(self, tag_id: int) -> Optional[Tag]:
        """Retourne le tag, ou None s'il n'est pas (ou plus) connu."""
        return self.tags.get().get(tag_id)

    def resolve_tags(self, tag_ids: Iterable[int]) -> list[Tag]:
        """Resout une liste de references, en ignorant les IDs inconnus."""
        index = self.tags.get()
        return [index[tag_id] for tag_id in tag_ids if tag_id in index]
