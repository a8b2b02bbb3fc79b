"""Konfigurationsmodul für den Chat-Responder: lädt Umgebungsvariablen
(Umgebung, Basis-Pfad, CORS, Logging, Port) via Pydantic-Settings."""
import json
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hält alle konfigurierbaren Werte, die der Host zur Laufzeit benötigt.
    Die Antwortregeln selbst sind nicht konfigurierbar."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_env: str = Field("production", alias="APP_ENV")
    api_base_path: str = Field("/api/chat", alias="API_BASE_PATH")
    # "*" oder kommagetrennte Liste bzw. JSON-Liste von Origins.
    cors_allow_origins: str = Field("*", alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str = Field("chat_debug.log", alias="LOG_FILE")  # Leer = nur Konsole.
    host: str = Field("0.0.0.0", alias="HOST")
    service_port: int = Field(1985, alias="SERVICE_PORT")

    @property
    def expose_error_details(self) -> bool:
        """Fehlerdetails nur im Development-Modus an den Client geben."""
        return self.app_env.strip().lower() == "development"

    @property
    def cors_origins(self) -> List[str]:
        raw = self.cors_allow_origins.strip()
        if raw.startswith("["):
            return [str(origin).strip() for origin in json.loads(raw)]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


settings = Settings()
