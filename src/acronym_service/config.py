"""Application configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = "http://localhost:8080,http://localhost:13000"
    cors_allow_all: bool = False

    # App
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    app_name: str = "Acronym Service"
    app_version: str = "0.1.0"

    # Extension switches
    acronym_disabled: bool = False
    acronym_disabled_functions: str = ""  # Comma-separated parser function names
    acronym_default_category: str = ""  # Empty means "all"
    acronym_source: str = ""  # Empty means "Acronyms" (page "Acronyms.json")

    # Acronym source
    acronym_source_backend: Literal["file", "mediawiki"] = "file"
    acronym_source_dir: str = "./data/messages"

    # MediaWiki
    mediawiki_index_url: str | None = None  # e.g. https://wiki.example.org/index.php
    mediawiki_namespace: str = "MediaWiki"
    source_timeout_seconds: int = 10
    source_user_agent: str = "AcronymService/0.1 (+acronym lookup)"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origins, or ["*"] if cors_allow_all is True.
        """
        if self.cors_allow_all:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def acronym_disabled_functions_set(self) -> frozenset[str]:
        """Parse disabled parser function names from comma-separated string."""
        return frozenset(
            name.strip().lower()
            for name in self.acronym_disabled_functions.split(",")
            if name.strip()
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
