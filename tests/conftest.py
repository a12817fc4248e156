"""
Fixtures pytest partagees pour les tests MediaTrack.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec fichier de log temporaire
- LibraryStore vierge
"""

from pathlib import Path

import pytest

from mediatrack.config import Settings
from mediatrack.services.store import LibraryStore


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test isoles.

    Le fichier de log est place dans tmp_path pour ne rien ecrire
    dans le repertoire courant.
    """
    return Settings(
        api_base_url="http://library.test",
        request_timeout=5.0,
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "mediatrack.log",
    )


@pytest.fixture
def library_store() -> LibraryStore:
    """LibraryStore vierge pour chaque test."""
    return LibraryStore()
