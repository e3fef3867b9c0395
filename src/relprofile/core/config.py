"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: RELPROFILE_
    """

    model_config = SettingsConfigDict(
        env_prefix="RELPROFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CSV ingestion
    csv_delimiter: str = Field(default=",", description="Field delimiter for CSV files")
    csv_quote: str = Field(default='"', description="Quote character for CSV files")
    csv_header: bool = Field(default=True, description="Whether CSV files have a header row")

    # UCC discovery
    ucc_max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads per search level (1 = sequential)",
    )

    # IND discovery
    ind_strip_quotes: bool = Field(
        default=True,
        description="Strip one pair of surrounding double quotes before comparing values",
    )

    # Similarity measures
    tokenizer_ngram_size: int = Field(default=3, ge=1, description="Character n-gram size")
    tokenizer_padding: bool = Field(default=False, description="Pad strings before tokenizing")
    jaccard_bag_semantics: bool = Field(
        default=False,
        description="Use multiset semantics for Jaccard similarity",
    )

    # Duplicate detection
    dedup_window_size: int = Field(default=4, ge=2, description="Sorted neighborhood window")
    dedup_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum weighted similarity for a duplicate",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
