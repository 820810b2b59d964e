"""Exceptions raised by the vector store talker."""


class ComplaintIndexError(Exception):
    """Base exception for complaint index errors."""
    pass


class ConfigurationError(ComplaintIndexError, ValueError):
    """Raised when required configuration is missing or unsupported."""
    pass


class EmptyInputError(ComplaintIndexError, ValueError):
    """Raised when an operation receives nothing to work on."""
    pass
