"""Application configuration via pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HashAlgorithm = Literal["sha256", "sha512", "sha3_256", "blake2b"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DUPE_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content digest
    hash_algorithm: HashAlgorithm = "sha256"
    chunk_size: int = Field(default=8192, gt=0)

    # Concurrent finder: max files being read at the same time
    max_concurrent: int = Field(default=32, gt=0)

    # Report: smallest group worth showing (1 = include unique files)
    min_group_size: int = Field(default=2, ge=1)


def get_settings(**overrides: object) -> Settings:
    """Create a Settings instance, allowing overrides for testing."""
    return Settings(**overrides)  # type: ignore[arg-type]
