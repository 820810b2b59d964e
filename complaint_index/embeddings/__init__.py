from complaint_index.embeddings.client import DEFAULT_EMBEDDING_MODEL, EmbeddingsClient

__all__ = ["EmbeddingsClient", "DEFAULT_EMBEDDING_MODEL"]
