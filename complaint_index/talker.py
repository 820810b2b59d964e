"""
Facade over the embedding provider and the vector index: store complaint
strings and search the complaints recorded against an item.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Sequence

from complaint_index.config import Settings, settings as default_settings
from complaint_index.embeddings.client import DEFAULT_EMBEDDING_MODEL, EmbeddingsClient
from complaint_index.errors import ConfigurationError, EmptyInputError
from complaint_index.models.schemas import ComplaintSearchRequest, ComplaintSearchResult
from complaint_index.vector_store import get_vector_store
from complaint_index.vector_store.base import DEFAULT_NAMESPACE, Match, StoredRecord, VectorIndex
from complaint_index.vector_store.pinecone_store import PineconeVectorIndex

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE_THRESHOLD = 0.8
DEFAULT_MAX_RESULTS = 10
DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True)
class TalkerConfig:
    vector_store_api_key: str
    embedding_api_key: str
    index_name: str | None
    host_url: str | None
    min_score_threshold: float = DEFAULT_MIN_SCORE_THRESHOLD
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    max_workers: int = DEFAULT_MAX_WORKERS
    include_values: bool = True


def filter_matches(matches: Sequence[Match], min_score: float) -> List[Match]:
    """Drop matches scoring below ``min_score``; survivors keep the order the index returned."""
    return [match for match in matches if match.score >= min_score]


class VectorStoreTalker:
    """Embeds strings, upserts them into the index and runs thresholded similarity search."""

    def __init__(
        self,
        vector_store_api_key: str | None,
        embedding_api_key: str | None,
        index_name: str | None = None,
        host_url: str | None = None,
        min_score_threshold: float = DEFAULT_MIN_SCORE_THRESHOLD,
        embedding_model: str = DEFAULT_EMBEDDING_MODEL,
        max_workers: int = DEFAULT_MAX_WORKERS,
        include_values: bool = True,
        vector_index: VectorIndex | None = None,
        embeddings_client: EmbeddingsClient | None = None,
    ) -> None:
        if not vector_store_api_key or not embedding_api_key:
            raise ConfigurationError(
                "API key and embedding API key are required to initialize VectorStoreTalker."
            )

        self.config = TalkerConfig(
            vector_store_api_key=vector_store_api_key,
            embedding_api_key=embedding_api_key,
            index_name=index_name,
            host_url=host_url,
            min_score_threshold=min_score_threshold,
            embedding_model=embedding_model,
            max_workers=max_workers,
            include_values=include_values,
        )
        self.embeddings_client = embeddings_client or EmbeddingsClient(
            api_key=embedding_api_key,
            model=embedding_model,
        )
        self.index = vector_index or PineconeVectorIndex(
            api_key=vector_store_api_key,
            index_name=index_name,
            host=host_url,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> "VectorStoreTalker":
        settings = settings or default_settings
        kwargs = {
            "vector_store_api_key": (
                settings.pinecone_api_key.get_secret_value() if settings.pinecone_api_key else None
            ),
            "embedding_api_key": settings.openai_api_key.get_secret_value() if settings.openai_api_key else None,
            "index_name": settings.pinecone_index_name,
            "host_url": settings.pinecone_host,
            "min_score_threshold": settings.min_score_threshold,
            "embedding_model": settings.embedding_model_name,
            "max_workers": settings.store_max_workers,
            "include_values": settings.query_include_values,
        }
        kwargs.update(overrides)
        if kwargs.get("vector_index") is None:
            kwargs["vector_index"] = get_vector_store(settings)
        return cls(**kwargs)

    @property
    def index_name(self) -> str | None:
        return self.config.index_name

    @property
    def min_score_threshold(self) -> float:
        return self.config.min_score_threshold

    @property
    def embedding_model(self) -> str:
        return self.config.embedding_model

    # --- Public API ---
    def embed_string_to_vector(self, text: str) -> List[float]:
        return self.embeddings_client.embed_text(text)

    def store_strings(self, strings: Sequence[str]) -> None:
        """
        Embed and upsert every string, one upsert request per string.

        Each record is keyed by the string itself, so storing the same text
        again overwrites the earlier record. Writes run on a bounded thread
        pool; the first failure fails the whole call. Writes that already
        finished stay in the index, strings not yet started are skipped.
        """
        if isinstance(strings, str):
            raise TypeError("strings must be a sequence of strings, not a single string")
        items = list(strings or [])
        if not items:
            raise EmptyInputError("Input must be a non-empty sequence of strings.")

        try:
            workers = max(1, min(self.config.max_workers, len(items)))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="store-strings") as pool:
                failed = threading.Event()
                futures = [pool.submit(self._store_one, text, failed) for text in items]
                done, pending = wait(futures, return_when=FIRST_EXCEPTION)
                for future in pending:
                    future.cancel()
                for future in futures:
                    if future in done and future.exception() is not None:
                        raise future.exception()
        except Exception:
            logger.exception("Error storing strings in vector index", extra={"count": len(items)})
            raise

        logger.info("Strings successfully stored in vector index", extra={"count": len(items)})

    def search_complaints_for_item(
        self,
        item_name: str | None = None,
        query_string: str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> ComplaintSearchResult | None:
        """
        Return ids of stored complaints similar to ``item_name``.

        ``query_string`` only counts towards deciding whether there is
        anything to search for; the query vector is built from
        ``item_name`` alone. Returns None when both are empty.
        """
        if not (item_name or query_string):
            return None

        if query_string:
            logger.debug("query_string is not used to build the query vector", extra={"item_name": item_name})

        vector = self.embed_string_to_vector(item_name)
        matches = self.index.query(
            vector=vector,
            top_k=max_results,
            include_values=self.config.include_values,
            namespace=DEFAULT_NAMESPACE,
        )
        relevant = filter_matches(matches, self.config.min_score_threshold)
        logger.info(
            "Complaint search completed",
            extra={"item_name": item_name, "matches": len(matches), "relevant": len(relevant)},
        )
        return ComplaintSearchResult(item_name=item_name, complains=[match.id for match in relevant])

    def search_complaints(self, request: ComplaintSearchRequest) -> ComplaintSearchResult | None:
        return self.search_complaints_for_item(
            item_name=request.item_name,
            query_string=request.query_string,
            max_results=request.max_results,
        )

    # --- Internals ---
    def _store_one(self, text: str, failed: threading.Event) -> None:
        # Branches picked up after another branch failed are skipped.
        if failed.is_set():
            return
        try:
            vector = self.embed_string_to_vector(text)
            record = StoredRecord(id=text, values=vector, metadata={"text": text})
            self.index.upsert([record], namespace=DEFAULT_NAMESPACE)
        except Exception:
            failed.set()
            raise


__all__ = [
    "VectorStoreTalker",
    "TalkerConfig",
    "filter_matches",
    "DEFAULT_MIN_SCORE_THRESHOLD",
    "DEFAULT_MAX_RESULTS",
    "DEFAULT_MAX_WORKERS",
]
