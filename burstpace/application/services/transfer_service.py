"""Transfer service - throttled write loops for blocking and asyncio hosts."""

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass

from burstpace.domain import OutputSink, RateThrottler, ThrottleConfig

logger = logging.getLogger(__name__)

# Constants
DEFAULT_CHUNK_SIZE = 65536


class AsyncioClock:
    """Clock implementation using asyncio event loop time."""

    def now(self) -> float:
        return asyncio.get_running_loop().time()


@dataclass(frozen=True)
class TransferResult:
    """Summary of a finished transfer."""

    bytes_sent: int
    pauses: int
    seconds_waited: float


class TransferService:
    """Service for streaming content through a RateThrottler.

    Each transfer gets its own throttle. The service owns the waiting,
    the throttle only computes the schedule.
    """

    def __init__(
        self,
        throttle_config: ThrottleConfig | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._throttle_config = throttle_config or ThrottleConfig()
        self._chunk_size = chunk_size
        self._sleep = sleep
        self._async_sleep = async_sleep

    @property
    def throttle_config(self) -> ThrottleConfig:
        return self._throttle_config

    def copy(
        self,
        source: Iterable[bytes],
        sink: OutputSink,
        throttler: RateThrottler | None = None,
    ) -> TransferResult:
        """Copy source into sink, blocking while the throttle says so.

        Args:
            source: Content chunks.
            sink: Destination, written only with permitted bytes.
            throttler: Throttle for this transfer (new one if omitted).

        Raises:
            OSError: The sink failed. The transfer is abandoned.
        """
        throttler = throttler or RateThrottler(self._throttle_config)
        self._log_start(throttler)
        sent = 0
        pauses = 0
        waited = 0.0

        for chunk in self._chunks(source):
            offset = 0
            while offset < len(chunk):
                decision = throttler.pace(len(chunk) - offset)
                permitted, wait = decision
                if permitted:
                    try:
                        self._write_all(sink, chunk[offset : offset + permitted])
                    except OSError as e:
                        logger.warning("Sink write failed bytes_sent=%d: %s", sent, e)
                        raise
                    offset += permitted
                    sent += permitted
                if decision.exhausted:
                    pauses += 1
                    waited += wait
                    self._sleep(wait)

        logger.info(
            "Transfer finished bytes_sent=%d pauses=%d waited=%.1f",
            sent,
            pauses,
            waited,
        )
        return TransferResult(bytes_sent=sent, pauses=pauses, seconds_waited=waited)

    async def stream(
        self,
        source: Iterable[bytes],
        throttler: RateThrottler | None = None,
    ) -> AsyncIterator[bytes]:
        """Yield permitted slices of source, awaiting between windows.

        Suitable as a response body for event-loop servers. Closing the
        generator (client gone) just drops the throttle.
        """
        throttler = throttler or RateThrottler(self._throttle_config, AsyncioClock())
        self._log_start(throttler)
        sent = 0

        for chunk in self._chunks(source):
            offset = 0
            while offset < len(chunk):
                decision = throttler.pace(len(chunk) - offset)
                permitted, wait = decision
                if permitted:
                    yield chunk[offset : offset + permitted]
                    offset += permitted
                    sent += permitted
                if decision.exhausted:
                    await self._async_sleep(wait)

        logger.debug("Stream finished bytes_sent=%d", sent)

    @staticmethod
    def _log_start(throttler: RateThrottler) -> None:
        if throttler.current_rate is None:
            logger.debug("Transfer started unthrottled")
            return
        logger.debug(
            "Transfer started rate=%d in_burst=%s",
            throttler.current_rate,
            throttler.in_burst,
        )

    def _chunks(self, source: Iterable[bytes]) -> Iterator[bytes]:
        """Re-slice source chunks to at most chunk_size bytes."""
        for chunk in source:
            for start in range(0, len(chunk), self._chunk_size):
                yield chunk[start : start + self._chunk_size]

    @staticmethod
    def _write_all(sink: OutputSink, data: bytes) -> None:
        """Write data completely, retrying short writes."""
        offset = 0
        while offset < len(data):
            written = sink.write(data[offset:])
            if written is None:
                return
            if written <= 0:
                raise BrokenPipeError("Sink accepted no bytes")
            offset += written
