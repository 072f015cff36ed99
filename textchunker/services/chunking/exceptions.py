"""Chunking error taxonomy. All errors surface to the immediate caller; nothing is retried."""


class ChunkingError(Exception):
    """Base class for chunking failures."""


class InvalidConfigError(ChunkingError):
    """Rejected configuration: chunk size <= 0, negative overlap, or overlap >= chunk size."""


class EmptyInputError(ChunkingError):
    """Statistics requested on an empty chunk collection."""


class ExternalSplitterError(ChunkingError):
    """Raised when a library-backed split fails. The library exception is kept as `cause`."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
