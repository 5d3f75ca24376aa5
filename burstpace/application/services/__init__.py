"""Application services - use case implementations."""

from .transfer_service import AsyncioClock, TransferResult, TransferService

__all__ = [
    "TransferService",
    "TransferResult",
    "AsyncioClock",
]
