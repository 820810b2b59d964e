import logging
from unittest.mock import patch

import pytest

from complaint_index.config import Settings, public_settings, setup_logging
from complaint_index.errors import ConfigurationError
from complaint_index.talker import VectorStoreTalker
from complaint_index.vector_store.chroma_store import ChromaVectorIndex
from complaint_index.vector_store.pinecone_store import PineconeVectorIndex


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("PINECONE_API_KEY", "pc-test")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("PINECONE_INDEX_NAME", "complaints")
    monkeypatch.setenv("PINECONE_HOST", "https://complaints.svc.pinecone.io")
    monkeypatch.setenv("MIN_SCORE_THRESHOLD", "0.65")
    monkeypatch.setenv("EMBEDDING_MODEL_NAME", "text-embedding-3-small")
    monkeypatch.setenv("STORE_MAX_WORKERS", "3")
    monkeypatch.setenv("QUERY_INCLUDE_VALUES", "false")


def test_settings_defaults(monkeypatch):
    for name in ("MIN_SCORE_THRESHOLD", "EMBEDDING_MODEL_NAME", "VECTOR_STORE_BACKEND", "STORE_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.min_score_threshold == 0.8
    assert settings.embedding_model_name == "text-embedding-ada-002"
    assert settings.vector_store_backend == "pinecone"
    assert settings.store_max_workers == 8


def test_settings_from_environment(env):
    settings = Settings(_env_file=None)

    assert settings.pinecone_api_key.get_secret_value() == "pc-test"
    assert settings.min_score_threshold == 0.65
    assert settings.query_include_values is False


def test_public_settings_hide_secrets():
    dumped = public_settings()
    assert "pinecone_api_key" not in dumped
    assert "openai_api_key" not in dumped
    assert "min_score_threshold" in dumped


def test_talker_from_settings(env, recording_index, embeddings_client):
    talker = VectorStoreTalker.from_settings(
        Settings(_env_file=None),
        vector_index=recording_index,
        embeddings_client=embeddings_client,
    )

    assert talker.index_name == "complaints"
    assert talker.min_score_threshold == 0.65
    assert talker.embedding_model == "text-embedding-3-small"
    assert talker.config.max_workers == 3
    assert talker.config.include_values is False
    assert talker.config.host_url == "https://complaints.svc.pinecone.io"


def test_talker_from_settings_without_keys(monkeypatch):
    monkeypatch.delenv("PINECONE_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        VectorStoreTalker.from_settings(Settings(_env_file=None))


def test_talker_from_settings_overrides(env):
    with patch("complaint_index.vector_store.pinecone_store.Pinecone"), \
            patch("complaint_index.embeddings.client.OpenAI"):
        talker = VectorStoreTalker.from_settings(Settings(_env_file=None), min_score_threshold=0.9)

    assert talker.min_score_threshold == 0.9


def test_talker_from_settings_uses_configured_backend(env, monkeypatch, tmp_path, embeddings_client):
    monkeypatch.setenv("VECTOR_STORE_BACKEND", "chroma")
    monkeypatch.setenv("VECTOR_STORE_PATH", str(tmp_path))

    with patch("complaint_index.vector_store.chroma_store.chromadb") as chromadb_module:
        talker = VectorStoreTalker.from_settings(Settings(_env_file=None), embeddings_client=embeddings_client)

    assert isinstance(talker.index, ChromaVectorIndex)
    chromadb_module.PersistentClient.assert_called_once_with(path=str(tmp_path))


def test_talker_from_settings_defaults_to_pinecone(env, embeddings_client):
    with patch("complaint_index.vector_store.pinecone_store.Pinecone") as pinecone_cls:
        talker = VectorStoreTalker.from_settings(Settings(_env_file=None), embeddings_client=embeddings_client)

    assert isinstance(talker.index, PineconeVectorIndex)
    assert talker.index.index_name == "complaints"
    assert talker.index.host == "https://complaints.svc.pinecone.io"
    pinecone_cls.assert_called_once_with(api_key="pc-test")


def test_setup_logging_configures_root_handler():
    with patch("complaint_index.config.logging.basicConfig") as basic_config:
        logger = setup_logging()

    basic_config.assert_called_once_with(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    assert logger.name == "complaint_index"
