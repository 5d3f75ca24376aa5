"""Generated content source."""

from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CHUNK_SIZE = 65536


@dataclass(frozen=True)
class RepeatedByteSource:
    """Produces `size` bytes consisting of one repeated fill pattern."""

    size: int
    fill: bytes = b"A"
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must not be negative")
        if not self.fill:
            raise ValueError("fill must not be empty")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

    def __iter__(self) -> Iterator[bytes]:
        # Pre-build one full chunk and slice the last one
        repeats = -(-self.chunk_size // len(self.fill))
        block = (self.fill * repeats)[: self.chunk_size]
        remaining = self.size
        while remaining > 0:
            take = min(remaining, self.chunk_size)
            yield block[:take]
            remaining -= take
