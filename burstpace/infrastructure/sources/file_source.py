"""File-backed content source."""

from collections.abc import Iterator
from pathlib import Path

from .repeated import DEFAULT_CHUNK_SIZE


class FileSource:
    """Reads a file from disk in fixed-size chunks."""

    def __init__(self, path: Path | str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._path = Path(path)
        self._chunk_size = chunk_size

    @property
    def path(self) -> Path:
        return self._path

    @property
    def size(self) -> int:
        return self._path.stat().st_size

    def __iter__(self) -> Iterator[bytes]:
        with open(self._path, "rb") as f:
            while chunk := f.read(self._chunk_size):
                yield chunk
