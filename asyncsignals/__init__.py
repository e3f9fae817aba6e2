"""
asyncsignals - Async State for Reactive Signals

asyncsignals models a value produced over time:
- AsyncState: immutable loading / data / error container with map dispatch
- Signal: observable cell that notifies subscribers on every replacement
- AsyncSignal: Signal holding an AsyncState that also acts as an event sink

asyncsignals does NOT:
- Compute derived values or track dependencies
- Batch notifications
- Expose futures that resolve when a state settles
"""

__version__ = "0.1.0"

from .state.async_state import AsyncState, AsyncPhase, Data, Failure
from .core.signal import Signal
from .core.event_sink import EventSinkMixin, AsyncSignal
from .core.producers import pipe_stream, run_request
from .errors import AsyncSignalsError, UnwrapError, UseAfterDisposeError
from .config import get_config, reset_config, load_config, configure_logging

__all__ = [
    # State
    "AsyncState",
    "AsyncPhase",
    "Data",
    "Failure",
    # Signals
    "Signal",
    "EventSinkMixin",
    "AsyncSignal",
    # Producers
    "pipe_stream",
    "run_request",
    # Errors
    "AsyncSignalsError",
    "UnwrapError",
    "UseAfterDisposeError",
    # Config
    "get_config",
    "reset_config",
    "load_config",
    "configure_logging",
]
