"""Configuration models for the application."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalendarConfig(BaseSettings):
    """Main configuration for the calendar service."""

    # Database
    database_url: str = Field(default="", description="PostgreSQL connection string")
    db_pool_size: int = Field(default=10, ge=1)
    db_pool_timeout: float = Field(default=30.0, description="Seconds to wait for a pooled connection")
    auto_create_schema: bool = Field(default=True, description="Run CREATE TABLE IF NOT EXISTS on startup")

    # HTTP Server configuration
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    read_only: bool = Field(default=False, description="Expose only the read-only event routes")

    # File storage
    upload_dir: str = Field(default="uploads")
    static_dir: str = Field(default="static")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def masked_database_url(self) -> str:
        """Database URL with the password replaced, for logging."""
        try:
            if "://" in self.database_url and "@" in self.database_url:
                scheme, rest = self.database_url.split("://", 1)
                auth, host_part = rest.rsplit("@", 1)
                if ":" in auth:
                    user, _ = auth.split(":", 1)
                    return f"{scheme}://{user}:***@{host_part}"
            return self.database_url
        except ValueError:
            return "***"
