"""
Configuración central de la app (fuente única de verdad).
Lee variables de entorno y expone un objeto Settings tipado.
El motor de puntuación no usa configuración; solo la capa HTTP.
"""
import os
from pydantic import BaseModel, Field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> list[str]:
    return [v.strip() for v in os.getenv(name, default).split(",") if v.strip()]


class Settings(BaseModel):
    APP_NAME: str = Field(default_factory=lambda: os.getenv("APP_NAME", "PsyScore API"))
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    # rechaza (422) respuestas fuera de escala o reactivos desconocidos en la frontera HTTP
    STRICT_RANGES: bool = Field(default_factory=lambda: _env_bool("STRICT_RANGES", "true"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

settings = Settings()
