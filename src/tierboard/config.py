"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, description="Server port")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Database
    database_url: str = Field(default="", description="Full SQLAlchemy database URL")
    db_host: str = Field(default="localhost", description="MySQL host")
    db_port: int = Field(default=3306, description="MySQL port")
    db_user: str = Field(default="", description="MySQL user")
    db_password: str = Field(default="", description="MySQL password")
    db_name: str = Field(default="", description="MySQL database name")
    sqlite_path: str = Field(default="./tierboard.db", description="SQLite fallback file")

    # Login gate
    credentials_file: str = Field(default="", description="JSON file with email/password")
    admin_email: str = Field(default="", description="Static login email")
    admin_password: str = Field(default="", description="Static login password")

    # Client
    api_base_url: str = Field(
        default="http://localhost:3001",
        description="Base URL the client sends API requests to",
    )

    @property
    def resolved_database_url(self) -> str:
        """Pick the database URL: explicit URL, then MySQL parts, then SQLite."""
        if self.database_url:
            return self.database_url
        if self.db_name:
            return (
                f"mysql+pymysql://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return f"sqlite:///{self.sqlite_path}"

    @property
    def has_credentials_file(self) -> bool:
        """Check if a credentials file is configured."""
        return bool(self.credentials_file)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
