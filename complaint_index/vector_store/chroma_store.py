"""
Chroma-based VectorIndex implementation for local development.
"""

from __future__ import annotations

import logging
from typing import List

import chromadb

from complaint_index.config import settings
from complaint_index.vector_store.base import DEFAULT_NAMESPACE, Match, StoredRecord, VectorIndex

CHROMA_COLLECTION = "complaints"
CHROMA_PERSIST_DIR = settings.vector_store_path

logger = logging.getLogger(__name__)


class ChromaVectorIndex(VectorIndex):
    """Chroma has no namespaces, so each namespace maps to its own collection."""

    def __init__(
        self,
        persist_directory: str | None = None,
        collection_name: str = CHROMA_COLLECTION,
        client=None,
    ) -> None:
        self.persist_directory = persist_directory or CHROMA_PERSIST_DIR
        self.collection_name = collection_name
        self.client = client or chromadb.PersistentClient(path=self.persist_directory)
        logger.info(
            "ChromaVectorIndex initialised",
            extra={"persist_directory": self.persist_directory, "collection": self.collection_name},
        )

    def _collection(self, namespace: str):
        name = f"{self.collection_name}-{namespace}" if namespace else self.collection_name
        return self.client.get_or_create_collection(name, metadata={"hnsw:space": "cosine"})

    def upsert(self, records: List[StoredRecord], namespace: str = DEFAULT_NAMESPACE) -> None:
        if not records:
            return

        self._collection(namespace).upsert(
            ids=[record.id for record in records],
            embeddings=[record.values for record in records],
            metadatas=[record.metadata or None for record in records],
        )
        logger.debug("Upserted records into Chroma", extra={"count": len(records), "collection": self.collection_name})

    def query(
        self,
        vector: List[float],
        top_k: int,
        include_values: bool = False,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> List[Match]:
        if top_k <= 0:
            return []

        include = ["metadatas", "distances"]
        if include_values:
            include.append("embeddings")

        result = self._collection(namespace).query(
            query_embeddings=[vector],
            n_results=top_k,
            include=include,
        )

        ids = (result.get("ids") or [[]])[0] or []
        metadatas = (result.get("metadatas") or [[]])[0] or []
        distances = (result.get("distances") or [[]])[0] or []
        embeddings = (result.get("embeddings") or [[]])[0] if include_values else None
        if embeddings is None:
            embeddings = [[] for _ in ids]

        matches: List[Match] = []
        for record_id, metadata, distance, values in zip(ids, metadatas, distances, embeddings):
            # cosine distance -> similarity, same scale as Pinecone's cosine score
            matches.append(
                Match(
                    id=record_id,
                    score=1.0 - float(distance),
                    values=[float(v) for v in values],
                    metadata=dict(metadata or {}),
                )
            )
        return matches


__all__ = ["ChromaVectorIndex", "CHROMA_COLLECTION", "CHROMA_PERSIST_DIR"]
