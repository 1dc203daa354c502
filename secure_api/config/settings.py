from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RateLimitConfig(BaseSettings):
    """Per-client request throttling configuration"""

    window_seconds: int = Field(default=3 * 60, ge=1)
    max_requests: int = Field(default=100, ge=1)
    message: str = "Trop de tentatives veuillez reessayer ulterieurement"

    model_config = SettingsConfigDict(
        env_prefix="RATE_LIMIT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Secure API"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # Log storage: <log_base_dir>/<log_dir_name>/{error,combined}.log
    log_base_dir: str = "."
    log_dir_name: str = "logs"
    log_level: str = "info"

    # Rate limiting
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def log_directory(self) -> Path:
        """Directory holding the append-only log files"""
        return Path(self.log_base_dir) / self.log_dir_name


# Global settings instance
settings = Settings()
