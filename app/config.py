"""Configuration settings using Pydantic"""
from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Supabase Configuration
    supabase_url: Optional[str] = Field(default=None, alias="SUPABASE_URL")
    supabase_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SUPABASE_KEY", "SUPABASE_SERVICE_KEY")
    )

    # Application Settings
    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="info", alias="LOG_LEVEL")
    port: int = Field(default=4000, alias="PORT")

    # Use the in-memory mock store when Supabase is not configured.
    # Never honoured in production.
    allow_mock_store: bool = Field(default=True, alias="ALLOW_MOCK_STORE")

    # Security Settings
    request_timeout_seconds: float = Field(default=60, alias="REQUEST_TIMEOUT_SECONDS")

    # CORS Settings
    allowed_origins: str = Field(
        default="*",
        alias="ALLOWED_ORIGINS",
        description="Comma-separated list of allowed origins for CORS"
    )

    # Client Settings
    api_base_url: str = Field(default="http://localhost:4000", alias="API_BASE_URL")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def origins(self) -> list:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
