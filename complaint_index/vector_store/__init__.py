"""
Vector index abstractions and factories.
"""

from __future__ import annotations

from complaint_index.config import Settings, settings as default_settings
from complaint_index.errors import ConfigurationError
from complaint_index.vector_store.base import VectorIndex
from complaint_index.vector_store.chroma_store import ChromaVectorIndex
from complaint_index.vector_store.pinecone_store import PineconeVectorIndex


def get_vector_store(settings: Settings | None = None) -> VectorIndex:
    """
    Factory to obtain the configured VectorIndex instance.
    Supports the Pinecone and Chroma backends.
    """
    settings = settings or default_settings
    backend = settings.vector_store_backend.lower()
    if backend == "pinecone":
        if not settings.pinecone_api_key:
            raise ConfigurationError("PINECONE_API_KEY is required for the pinecone backend")
        return PineconeVectorIndex(
            api_key=settings.pinecone_api_key.get_secret_value(),
            index_name=settings.pinecone_index_name,
            host=settings.pinecone_host,
        )
    if backend == "chroma":
        return ChromaVectorIndex(persist_directory=settings.vector_store_path)
    raise ConfigurationError(f"Unsupported vector store backend: {backend}")


__all__ = ["get_vector_store", "VectorIndex", "ChromaVectorIndex", "PineconeVectorIndex"]
