"""
Configuración del generador cargada desde variables de entorno (.env)

El archivo de defaults (defaults.elko) puede sobreescribir mongo, trace y book.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULTS_FILE = "defaults.elko"

# Claves del archivo de defaults que se copian a Settings
DEFAULTS_KEYS = ("mongo", "trace", "book")


class Settings(BaseSettings):
    # MongoDB
    mongo: str = "neohabitatmongo:27017/elko"  # host:puerto/base_de_datos
    mongo_db_name: str = "elko"  # Se usa si mongo no trae base de datos
    users_collection: str = "odb"

    # Salida
    book: str = "../db/Text/text-bookofrecords.json"  # JSON de The Book of Records

    # Nivel de trazas (nombres de winston: error, warn, info, verbose, debug, silly)
    trace: str = "error"

    # App
    app_env: str = "development"  # o "production"

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def mongodb_uri(self) -> str:
        """URI completa para el cliente de Mongo"""
        if self.mongo.startswith("mongodb://") or self.mongo.startswith("mongodb+srv://"):
            return self.mongo
        return f"mongodb://{self.mongo}"


def read_defaults_file(path: str | Path = DEFAULTS_FILE) -> dict[str, Any]:
    """
    Lee el archivo de defaults (JSON).

    Si falta o es inválido se sigue con los valores de fábrica.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.debug(f"Missing/invalid {path} configuration file. Proceeding with factory defaults.")
        return {}

    if not isinstance(data, dict):
        logger.debug(f"{path} is not a JSON object. Proceeding with factory defaults.")
        return {}

    return {key: data[key] for key in DEFAULTS_KEYS if data.get(key)}


def load_settings(
    defaults_path: str | Path = DEFAULTS_FILE,
    overrides: Optional[dict[str, Any]] = None
) -> Settings:
    """
    Construye Settings combinando: entorno < archivo de defaults < overrides (CLI).
    """
    values = read_defaults_file(defaults_path)
    if overrides:
        values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return load_settings()
