"""
Configuration management for the catalog
"""


import threading
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    environment: str = Field("development")
    log_level: str = Field("INFO")

    # Log files
    log_dir: str = Field("logs")
    log_to_file: bool = Field(False)
    log_max_bytes: int = Field(10 * 1024 * 1024, gt=0)  # 10MB
    log_backup_count: int = Field(5, ge=0)

    # Presenter settings
    default_format: Literal["json", "xml"] = Field("json")
    xml_root_tag: str = Field("category", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config():
    """Drop the cached settings so the next get_config() re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
