from __future__ import annotations


class PassageKBError(Exception):
    """Base class for errors raised outside the pure extraction engine."""


class ConfigurationError(PassageKBError):
    """Raised for invalid or missing configuration."""


class DocumentLoadError(PassageKBError):
    """Raised when the reference text cannot be read."""


class DocumentNotFoundError(DocumentLoadError):
    """Raised when the reference text file does not exist."""
