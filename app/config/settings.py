"""Application configuration using Pydantic settings."""

from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # API Configuration
    API_TITLE: str = "GlamBook API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Beauty service booking platform backend"
    API_PREFIX: str = "/api"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    TESTING: bool = False

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./glambook.db", description="Async SQLAlchemy database URL"
    )

    # JWT Configuration
    JWT_SECRET_KEY: str = Field(
        default="dev-jwt-secret-key-super-long-for-local-development-only",
        min_length=32,
        description="Secret key for JWT tokens",
    )
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    JWT_ISSUER: str = "glambook-auth"
    JWT_AUDIENCE: str = "glambook-api"

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:5173"]
    ALLOWED_METHODS: list[str] = ["GET", "POST", "PUT", "DELETE", "PATCH"]
    ALLOWED_HEADERS: list[str] = ["Content-Type", "Authorization"]

    # Monitoring
    LOG_LEVEL: str = "INFO"

    # Password Policy
    PASSWORD_MIN_LENGTH: int = 6

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("ALLOWED_ORIGINS")
    @classmethod
    def validate_origins(cls, v):
        """Validate CORS origins."""
        validated_origins = []
        for origin in v:
            if origin == "*":
                validated_origins.append(origin)
                continue
            try:
                TypeAdapter(AnyHttpUrl).validate_python(origin)
            except ValueError:
                raise ValueError(f"Invalid origin URL: {origin}")
            validated_origins.append(origin)
        return validated_origins


# Global settings instance
settings = Settings()
