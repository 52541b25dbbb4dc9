"""
Configuration module for the page server.
Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_ENV = "development"

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Mode
    app_env: str = Field(default="", alias="APP_ENV")

    # Vite
    vite_dev_server: str = Field(default="http://localhost:5173", alias="VITE_DEV_SERVER")
    dist_dir: str = Field(default="public/static", alias="DIST_DIR")
    static_url_path: str = Field(default="/static", alias="STATIC_URL_PATH")

    # Templates
    templates_dir: str = Field(default=str(PACKAGE_TEMPLATES_DIR), alias="TEMPLATES_DIR")
    template_name: str = Field(default="index.html", alias="TEMPLATE_NAME")
    page_title: str = Field(default="Vite + FastAPI Example", alias="PAGE_TITLE")

    # API
    api_port: int = Field(default=8080, alias="API_PORT")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")

    # Logging
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    @property
    def is_development(self) -> bool:
        """Only the exact value "development" selects development mode."""
        return self.app_env == DEVELOPMENT_ENV

    @property
    def manifest_path(self) -> Path:
        return Path(self.dist_dir) / ".vite" / "manifest.json"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
