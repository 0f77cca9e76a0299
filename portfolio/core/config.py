from __future__ import annotations

from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PORTFOLIO_", env_file=".env", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Diretório público: servido como estático e raiz do catálogo/uploads
    PUBLIC_DIR: Path = Path("public")
    CATALOG_FILE: Path | None = None
    IMAGES_DIR: Path | None = None
    UPLOAD_URL_PREFIX: str = "/images"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # Onde o site publicado expõe o catálogo (usado pela CLI)
    CATALOG_URL: str = "http://localhost:5173/projects.json"

    READ_ONLY: bool = False

    @model_validator(mode="after")
    def _derive_paths(self) -> "Settings":
        if self.CATALOG_FILE is None:
            self.CATALOG_FILE = self.PUBLIC_DIR / "projects.json"
        if self.IMAGES_DIR is None:
            self.IMAGES_DIR = self.PUBLIC_DIR / "images"
        return self


settings = Settings()
