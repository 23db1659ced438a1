"""Application configuration using Pydantic Settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Service identity (reported by /health)
    service_name: str = "time-tracking"
    service_version: str = "1.0.0"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8000"

    # Issue statuses that auto-stop running timers
    auto_stop_statuses: str = "closed,done"

    # CSV export
    export_filename: str = "time_entries.csv"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def auto_stop_statuses_list(self) -> list[str]:
        """Parse auto-stop statuses from comma-separated string."""
        return [
            status.strip()
            for status in self.auto_stop_statuses.split(",")
            if status.strip()
        ]


settings = Settings()
