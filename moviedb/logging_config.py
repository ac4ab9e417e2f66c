"""
Configuration du logging via loguru.

La bibliothèque logue via loguru sans installer de handler à l'import.
Le container expose la ressource `logging` (init_logging) qui installe :
- Sortie console : colorée, au niveau demandé
- Sortie fichier : JSON avec rotation, si un chemin est fourni

Les handlers installés sont retirés à l'arrêt de la ressource.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from loguru import logger

if TYPE_CHECKING:
    from moviedb.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    replace_existing: bool = True,
) -> list[int]:
    """Installe les handlers console et fichier.

    Args :
        log_level : Niveau minimum de la sortie console
        log_file : Fichier JSON de destination (pas de sortie fichier si None)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
        replace_existing : Retire d'abord les handlers déjà installés

    Returns :
        Identifiants loguru des handlers ajoutés
    """
    if replace_existing:
        logger.remove()

    handler_ids = [
        logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)
    ]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                level="DEBUG",  # Requêtes et cache hits/miss en DEBUG
                format="{message}",
                serialize=True,
                rotation=rotation_size,
                retention=retention_count,
                compression="zip",
                enqueue=True,
            )
        )

    logger.debug("Logging configuré", level=log_level, log_file=str(log_file))
    return handler_ids


def init_logging(settings: "Settings") -> Iterator[list[int]]:
    """Ressource dependency-injector : configure depuis Settings, nettoie à l'arrêt."""
    handler_ids = configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    yield handler_ids
    for handler_id in handler_ids:
        logger.remove(handler_id)
