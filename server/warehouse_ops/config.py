"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables (12-factor app).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    app_name: str = Field(default="Warehouse Consolidation API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Enable debug mode")

    # === Server ===
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # === CORS ===
    cors_origins: str = Field(default="*", description="Comma-separated list of allowed CORS origins")

    # === Logging ===
    log_level: str = Field(default="INFO", description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    log_format: str = Field(default="json", description="Log format: json or text")

    # === Uploads ===
    default_document_id: str = Field(
        default="N/A",
        description="Document id used when an upload has no DN column and none is supplied",
    )
    max_upload_bytes: int = Field(
        default=20 * 1024 * 1024,
        description="Maximum size of a single uploaded spreadsheet",
    )

    # === Material Lookup Service ===
    # Optional remote barcode -> material service consulted before the local classifier
    material_lookup_base_url: Optional[str] = Field(
        default=None,
        description="Material lookup API base URL (e.g., http://materials-service:8000)"
    )
    material_lookup_timeout_seconds: float = Field(
        default=5,
        description="Timeout in seconds for material lookup requests"
    )
    material_lookup_cache_ttl_seconds: int = Field(
        default=300,
        description="TTL in seconds for material lookup response caching"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use dependency injection in FastAPI routes: settings = Depends(get_settings)
    """
    return Settings()
