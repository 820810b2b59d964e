import threading
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from complaint_index.embeddings.client import EmbeddingsClient
from complaint_index.talker import VectorStoreTalker
from complaint_index.vector_store.base import Match


def make_embedding_response(vector):
    return SimpleNamespace(data=[SimpleNamespace(embedding=vector)])


class RecordingIndex:
    """In-memory VectorIndex that records every call it receives."""

    def __init__(self, matches=None):
        self.upserts = []
        self.queries = []
        self.matches = matches or []
        self._lock = threading.Lock()

    def upsert(self, records, namespace=""):
        with self._lock:
            self.upserts.append((list(records), namespace))

    def query(self, vector, top_k, include_values=False, namespace=""):
        self.queries.append(
            {"vector": vector, "top_k": top_k, "include_values": include_values, "namespace": namespace}
        )
        return list(self.matches)


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.embeddings.create.side_effect = lambda model, input: make_embedding_response([float(len(input)), 0.5])
    return client


@pytest.fixture
def embeddings_client(openai_client):
    return EmbeddingsClient(api_key="sk-test", model="text-embedding-ada-002", client=openai_client)


@pytest.fixture
def recording_index():
    return RecordingIndex()


@pytest.fixture
def talker(embeddings_client, recording_index):
    return VectorStoreTalker(
        vector_store_api_key="pc-test",
        embedding_api_key="sk-test",
        index_name="complaints",
        host_url="https://complaints.svc.pinecone.io",
        vector_index=recording_index,
        embeddings_client=embeddings_client,
    )


@pytest.fixture
def scored_matches():
    return [
        Match(id="a", score=0.95),
        Match(id="b", score=0.5),
        Match(id="c", score=0.81),
    ]
