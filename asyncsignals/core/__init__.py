"""asyncsignals Core Module - Signals, sinks and producers."""

from .signal import Signal
from .event_sink import EventSinkMixin, AsyncSignal
from .producers import pipe_stream, run_request

__all__ = [
    "Signal",
    "EventSinkMixin",
    "AsyncSignal",
    "pipe_stream",
    "run_request",
]
