"""Configuration management for ReviewLens."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .constants import BatchConstants


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="REVIEWLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Sentiment classifier
    classifier_backend: str = Field("transformers", description="'transformers' or 'vader'")
    model_name: str = Field(
        "distilbert-base-uncased-finetuned-sst-2-english",
        description="Hugging Face sentiment model",
    )
    preferred_device: str = Field("cuda", description="High-performance device tried before CPU")
    max_text_chars: int = Field(512, description="Characters of each review passed to the model")
    load_retries: int = Field(2, description="Load attempts per execution mode")
    load_retry_delay: float = Field(1.0, description="Base delay between load attempts in seconds")

    # Batching
    batch_size: int = Field(BatchConstants.BATCH_SIZE, description="Reviews classified concurrently")
    batch_delay: float = Field(BatchConstants.BATCH_DELAY, description="Pause between batches in seconds")
    classify_timeout: Optional[float] = Field(None, description="Seconds to wait for one batch of classifications")

    # Topics
    topics_file: Optional[str] = Field(None, description="YAML file overriding the topic table")

    # Caller-side filtering
    min_review_length: int = Field(10, description="Reviews must be longer than this after trimming")
    max_reviews: int = Field(50, description="Maximum reviews per analysis")


# Global settings instance
settings = Settings()
