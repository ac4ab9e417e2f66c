"""
Configuration de la bibliothèque via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIEDB_,
et peut optionnellement être fournie via un fichier .env.

La clé API est la seule valeur obligatoire. Elle n'est ni validée ni renouvelée:
une clé invalide se manifeste par un échec du transport.
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moviedb.utils.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_IMAGE_BASE_URL,
    DEFAULT_IMAGE_CACHE_SIZE,
    DEFAULT_REQUEST_TIMEOUT,
)


class Settings(BaseSettings):
    """Paramètres du client avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIEDB_.
    Exemple : MOVIEDB_API_KEY=xxx MOVIEDB_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credential statique ajoutée à chaque requête
    api_key: str

    # Hôtes
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL)
    image_base_url: str = Field(default=DEFAULT_IMAGE_BASE_URL)

    # Réseau et cache
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    image_cache_size: int = Field(default=DEFAULT_IMAGE_CACHE_SIZE, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=Path("logs/moviedb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("api_base_url", "image_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Vérifie le schéma http(s) et retire le '/' final."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("L'URL de base doit être une URL http(s) avec un hôte")
        return v.rstrip("/")

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home. Une valeur vide désactive le fichier."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()
