"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Duration : Duree (secondes + nanosecondes)
- Platform : Plateforme de visionnage (liste fermee)
- SchemeKind : Preference de theme (clair, sombre, systeme)
- Key : Reference vers une entree de catalogue externe
- OlId / OlIdKind : Identifiant Open Library
"""

from mediatrack.core.value_objects.library import (
    PLATFORMS,
    Duration,
    Key,
    OlId,
    OlIdKind,
    Platform,
    SchemeKind,
    resolve_dark_theme,
)

__all__ = [
    "PLATFORMS",
    "Duration",
    "Key",
    "OlId",
    "OlIdKind",
    "Platform",
    "SchemeKind",
    "resolve_dark_theme",
]
