"""
OpenAI embeddings client.
"""

from __future__ import annotations

import logging
from typing import List

from openai import OpenAI

from complaint_index.config import settings

DEFAULT_EMBEDDING_MODEL = settings.embedding_model_name

logger = logging.getLogger(__name__)


class EmbeddingsClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_EMBEDDING_MODEL,
        client: OpenAI | None = None,
    ) -> None:
        self.model = model
        if api_key is None and settings.openai_api_key:
            api_key = settings.openai_api_key.get_secret_value()
        self.client = client or OpenAI(api_key=api_key)

    def embed_text(self, text: str) -> List[float]:
        """Embed a single string with one request; the first vector of the response is returned."""
        try:
            response = self.client.embeddings.create(model=self.model, input=text)
            return list(response.data[0].embedding)
        except Exception:
            logger.exception("Error generating embedding", extra={"model": self.model})
            raise


__all__ = ["EmbeddingsClient", "DEFAULT_EMBEDDING_MODEL"]
