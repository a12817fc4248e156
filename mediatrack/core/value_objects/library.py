"""
Objets valeur de la bibliotheque.

Objets valeur immutables partages par les films et les livres :
durees, plateformes de visionnage, identifiants Open Library et
preference de theme.
"""

from dataclasses import dataclass
from enum import Enum


NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class Duration:
    """
    Duree ecoulee (durée d'un film) au format du service distant.

    Attributs :
        secs : Nombre de secondes entieres
        nanos : Reste sub-seconde en nanosecondes, dans [0, 1e9)
    """

    secs: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        if self.secs < 0:
            raise ValueError(f"secs must be >= 0, got {self.secs}")
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"nanos must be in [0, 1e9), got {self.nanos}")

    @classmethod
    def from_minutes(cls, minutes: int) -> "Duration":
        """Construit une duree a partir d'un nombre de minutes (runtime TMDB)."""
        return cls(secs=minutes * 60)

    @property
    def total_seconds(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SECOND

    @property
    def minutes(self) -> int:
        """Duree arrondie a la minute inferieure."""
        return self.secs // 60


class Platform(str, Enum):
    """Plateforme de visionnage d'un film.

    Liste fermee, la valeur est le libelle echange avec le service.
    """

    DISNEY_PLUS = "Disney+"
    JELLYFIN = "Jellyfin"
    NETFLIX = "Netflix"
    PRIME_VIDEO = "Prime Video"
    YOUTUBE = "YouTube"
    DVD = "DVD"
    BLURAY = "BluRay"
    CINEMA = "Cinema"
    TV = "TV"
    AIRPLANE = "Airplane"
    APPLE_TV = "Apple TV"
    STAN = "Stan"

    def __str__(self) -> str:
        return self.value


PLATFORMS: tuple[str, ...] = tuple(platform.value for platform in Platform)


class SchemeKind(Enum):
    """Preference de theme de couleur.

    Valeurs:
        LIGHT: Theme clair force
        DARK: Theme sombre force
        SYSTEM: Suit la preference du systeme
    """

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


def resolve_dark_theme(scheme: SchemeKind, system_prefers_dark: bool) -> bool:
    """
    Resout la preference de theme en un booleen "theme sombre".

    Args:
        scheme: Preference choisie par l'utilisateur
        system_prefers_dark: Preference remontee par le systeme

    Returns:
        True si le theme sombre doit etre affiche
    """
    if scheme is SchemeKind.SYSTEM:
        return system_prefers_dark
    return scheme is SchemeKind.DARK


class OlIdKind(Enum):
    """Type d'entite Open Library, encode par le suffixe de l'identifiant."""

    AUTHOR = "A"
    BOOK = "M"
    WORK = "W"


@dataclass(frozen=True)
class OlId:
    """
    Identifiant Open Library (ex: "OL45804W").

    Attributs :
        number : Partie numerique
        kind : Type d'entite (auteur, edition, oeuvre)
    """

    number: int
    kind: OlIdKind

    @classmethod
    def parse(cls, text: str) -> "OlId":
        """
        Parse un identifiant de la forme OL{n}{A|M|W}.

        Raises:
            ValueError: Si le prefixe, la partie numerique ou le suffixe est invalide
        """
        if not text.startswith("OL"):
            raise ValueError(f"missing 'OL' prefix in {text!r}")
        rest = text[2:]
        number, suffix = rest[:-1], rest[-1:]
        if not number.isdigit():
            raise ValueError(f"invalid numeric part {number!r} in {text!r}")
        try:
            kind = OlIdKind(suffix)
        except ValueError:
            raise ValueError(f"invalid ID suffix {suffix!r} in {text!r}") from None
        return cls(number=int(number), kind=kind)

    def __str__(self) -> str:
        return f"OL{self.number}{self.kind.value}"


@dataclass(frozen=True)
class Key:
    """
    Reference composee vers une entree d'un catalogue externe.

    Utilisee pour pointer vers des auteurs, oeuvres ou editions
    Open Library sans les posseder.

    Attributs :
        path : Chemin de la collection (ex: "/works")
        id : Identifiant dans la collection (ex: "OL45804W")
    """

    path: str
    id: str

    @classmethod
    def parse(cls, text: str) -> "Key":
        """Parse une cle de la forme "/works/OL45804W"."""
        path, sep, key_id = text.rpartition("/")
        if not sep:
            raise ValueError(f"missing path in {text!r}")
        return cls(path=path, id=key_id)

    @property
    def olid(self) -> OlId:
        return OlId.parse(self.id)

    def __str__(self) -> str:
        return f"{self.path}/{self.id}"
