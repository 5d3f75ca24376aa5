"""Data source port - produces the bytes to throttle."""

from collections.abc import Iterator
from typing import Protocol


class DataSource(Protocol):
    """Protocol for content streamed through the throttle."""

    @property
    def size(self) -> int:
        """Total number of bytes the source produces."""
        ...

    def __iter__(self) -> Iterator[bytes]:
        """Yield the content as non-empty chunks."""
        ...
