"""
Store complaint strings as embeddings in a managed vector index and search
them back by item name.
"""

from complaint_index.config import setup_logging
from complaint_index.errors import ComplaintIndexError, ConfigurationError, EmptyInputError
from complaint_index.models.schemas import ComplaintSearchRequest, ComplaintSearchResult
from complaint_index.talker import VectorStoreTalker

__all__ = [
    "VectorStoreTalker",
    "ComplaintSearchRequest",
    "ComplaintSearchResult",
    "ComplaintIndexError",
    "ConfigurationError",
    "EmptyInputError",
    "setup_logging",
]
