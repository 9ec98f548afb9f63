import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

# Chargement des variables d'environnement
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Service settings read from the environment (and a local .env file)."""

    service_name: str = os.getenv("SERVICE_NAME", "products-service")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string means stderr
    log_file: str = os.getenv("LOG_FILE", "logs.json")
    log_serialize: bool = _as_bool(os.getenv("LOG_SERIALIZE", "true"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
