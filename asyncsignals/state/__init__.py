"""asyncsignals State Module - Async value container."""

from .async_state import AsyncState, AsyncPhase, Data, Failure, MISSING

__all__ = [
    "AsyncState",
    "AsyncPhase",
    "Data",
    "Failure",
    "MISSING",
]
