"""
Package configuration loaded from environment variables.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised settings for the vector store talker."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    pinecone_api_key: SecretStr | None = Field(default=None, alias="PINECONE_API_KEY")
    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")

    pinecone_index_name: str | None = Field(default=None, alias="PINECONE_INDEX_NAME")
    pinecone_host: str | None = Field(default=None, alias="PINECONE_HOST")

    embedding_model_name: str = Field(default="text-embedding-ada-002", alias="EMBEDDING_MODEL_NAME")

    min_score_threshold: float = Field(default=0.8, alias="MIN_SCORE_THRESHOLD")
    query_include_values: bool = Field(default=True, alias="QUERY_INCLUDE_VALUES")

    store_max_workers: int = Field(default=8, alias="STORE_MAX_WORKERS")

    vector_store_backend: str = Field(default="pinecone", alias="VECTOR_STORE_BACKEND")
    vector_store_path: str = Field(default="./data/vector_store", alias="VECTOR_STORE_PATH")


settings = Settings()


def setup_logging() -> logging.Logger:
    """
    Configure base logging for applications embedding the package.

    The package itself only emits through module loggers; call this once at
    startup to get the records on stderr.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    return logging.getLogger("complaint_index")


def public_settings() -> Dict[str, Any]:
    """
    Return settings without secrets for safe logging/inspection.
    """
    return settings.model_dump(
        exclude={"pinecone_api_key", "openai_api_key"},
        exclude_none=True,
    )


__all__ = ["Settings", "settings", "setup_logging", "public_settings"]
