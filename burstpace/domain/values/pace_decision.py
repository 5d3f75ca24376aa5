"""Result of a single pacing request."""

from typing import NamedTuple


class PaceDecision(NamedTuple):
    """How many bytes may go out now, and how long to wait before the rest."""

    permitted: int
    wait: float

    @property
    def exhausted(self) -> bool:
        """True when the caller has to wait before sending more."""
        return self.wait > 0
