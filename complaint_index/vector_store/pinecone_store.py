"""
Pinecone-based VectorIndex implementation.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List

from pinecone import Pinecone

from complaint_index.vector_store.base import DEFAULT_NAMESPACE, Match, StoredRecord, VectorIndex

logger = logging.getLogger(__name__)


class PineconeVectorIndex(VectorIndex):
    def __init__(
        self,
        api_key: str,
        index_name: str | None,
        host: str | None = None,
        client: Pinecone | None = None,
    ) -> None:
        self.index_name = index_name
        self.host = host
        self.client = client or Pinecone(api_key=api_key)
        self._index: Any = None
        self._index_lock = threading.Lock()

    @property
    def index(self) -> Any:
        # Resolved on first use so construction stays offline; store_strings workers race here.
        with self._index_lock:
            if self._index is None:
                self._index = self.client.Index(name=self.index_name or "", host=self.host or "")
                logger.info("Pinecone index handle created", extra={"index": self.index_name, "host": self.host})
        return self._index

    def upsert(self, records: List[StoredRecord], namespace: str = DEFAULT_NAMESPACE) -> None:
        if not records:
            return

        self.index.upsert(vectors=[record.to_dict() for record in records], namespace=namespace)
        logger.debug("Upserted records into Pinecone", extra={"count": len(records), "index": self.index_name})

    def query(
        self,
        vector: List[float],
        top_k: int,
        include_values: bool = False,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> List[Match]:
        response = self.index.query(
            vector=vector,
            top_k=top_k,
            include_values=include_values,
            namespace=namespace,
        )

        matches: List[Match] = []
        for item in response.matches:
            matches.append(
                Match(
                    id=item.id,
                    score=float(item.score),
                    values=list(getattr(item, "values", None) or []),
                    metadata=dict(getattr(item, "metadata", None) or {}),
                )
            )
        return matches


__all__ = ["PineconeVectorIndex"]
