"""Content sources for downloads."""

from .file_source import FileSource
from .repeated import DEFAULT_CHUNK_SIZE, RepeatedByteSource

__all__ = [
    "RepeatedByteSource",
    "FileSource",
    "DEFAULT_CHUNK_SIZE",
]
