"""Output sink port - where throttled bytes end up."""

from typing import Protocol


class OutputSink(Protocol):
    """Protocol for a byte sink (socket, file, response body).

    Infrastructure provides the actual implementation.
    """

    def write(self, data: bytes) -> int | None:
        """Write data, returning the number of bytes accepted.

        None means everything was accepted. Raises OSError on failure.
        """
        ...
