"""
Configuration du logging de l'application via loguru.

Deux destinations :
- stderr : format court et colore, avec les champs extra de chaque appel
  (status, count, tmdb_id...) pour suivre les echanges avec le service
- fichier (optionnel) : un objet JSON par ligne, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Niveau console selon le nombre de -v (0, 1, 2+)
_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def level_for_verbosity(verbose: int, quiet: bool = False, default: str = "WARNING") -> str:
    """Traduit les options --verbose / --quiet de la CLI en niveau de log."""
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def _add_console_sink(level: str) -> int:
    return logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)


def _add_file_sink(log_file: Path, level: str, rotation: str, retention: int) -> int:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return logger.add(
        log_file,
        level=level,
        serialize=True,
        rotation=rotation,
        retention=retention,
        compression="zip",
        enqueue=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    file_level: str = "DEBUG",
) -> None:
    """
    Remplace les sinks loguru par ceux de MediaTrack.

    Args:
        log_level: Niveau minimum sur stderr
        log_file: Fichier JSON, None pour ne journaliser que sur stderr
        rotation_size: Taille declenchant la rotation (ex: "10 MB")
        retention_count: Nombre de fichiers archives conserves
        file_level: Niveau minimum dans le fichier (DEBUG garde chaque requete)
    """
    logger.remove()
    _add_console_sink(log_level)
    if log_file is not None:
        _add_file_sink(log_file, file_level, rotation_size, retention_count)
