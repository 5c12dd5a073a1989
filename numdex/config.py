"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INDEX_FILE_NAME = "Numbered Folders Index.md"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Vault
    vault_path: Path
    include_hidden: bool = False

    # Index document
    index_file_name: str = DEFAULT_INDEX_FILE_NAME
    timestamp_format: str = "%c"

    @field_validator("vault_path")
    @classmethod
    def validate_vault_path(cls, v: Path) -> Path:
        """Ensure vault path exists and is a directory."""
        if not v.exists():
            raise ValueError(f"Vault path does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Vault path is not a directory: {v}")
        return v.resolve()

    @field_validator("index_file_name")
    @classmethod
    def validate_index_file_name(cls, v: str) -> str:
        """Index file lives at a vault-relative path and must be a note."""
        v = v.strip().lstrip("/")
        if not v:
            raise ValueError("Index file name must not be empty")
        if not v.endswith(".md"):
            v += ".md"
        return v


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
