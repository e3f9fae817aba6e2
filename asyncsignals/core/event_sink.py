"""
asyncsignals Event Sink

Lets a Signal holding an AsyncState act as a push sink:
- add(value) replaces the state with fresh data
- add_error(error) replaces the state with a fresh error (held value dropped)
- close() disposes the signal
"""

from __future__ import annotations
from typing import Generic, Optional, TypeVar
from types import TracebackType
import logging

from .signal import Signal
from ..state.async_state import AsyncState


logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


class EventSinkMixin(Generic[T, E]):
    """Sink operations for a Signal[AsyncState[T, E]]."""

    def add(self: Signal[AsyncState[T, E]], value: T) -> None:
        """Replace the state with data(value)."""
        self.set(AsyncState.data(value))

    def add_error(
        self: Signal[AsyncState[T, E]],
        error: E,
        stack_trace: Optional[TracebackType] = None,
    ) -> None:
        """Replace the state with an error. Any held value is dropped."""
        self.set(AsyncState.failure(error, stack_trace))

    def close(self: Signal[AsyncState[T, E]]) -> None:
        """Dispose the underlying signal."""
        self.dispose()


class AsyncSignal(EventSinkMixin[T, E], Signal[AsyncState[T, E]]):
    """
    Signal holding an AsyncState, usable as an event sink.

    Starts loading unless an initial state is given.
    """

    def __init__(
        self,
        value: Optional[AsyncState[T, E]] = None,
        *,
        debug_label: Optional[str] = None,
        skip_equal: Optional[bool] = None,
    ):
        super().__init__(
            value if value is not None else AsyncState.loading(),
            debug_label=debug_label,
            skip_equal=skip_equal,
        )

    def set_loading(self) -> None:
        """Move to loading, keeping the held value or error."""
        self.set(self.value.with_loading())

    def set_reloading(self) -> None:
        """Move to reloading, keeping the held value or error."""
        self.set(self.value.with_reloading())
