"""
asyncsignals Signal

A reactive cell that holds one value and notifies subscribers
synchronously whenever the value is replaced.

Lifecycle:
- set() stores a value and notifies every listener in subscription order
- dispose() makes the cell inert; later writes raise UseAfterDisposeError
"""

from __future__ import annotations
from typing import Callable, Generic, List, Optional, TypeVar
import logging

from ..config import get_config
from ..errors import UseAfterDisposeError


logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Signal(Generic[T]):
    """A reactive signal that notifies subscribers on change."""

    def __init__(
        self,
        value: T,
        *,
        debug_label: Optional[str] = None,
        skip_equal: Optional[bool] = None,
    ):
        """
        Initialize a signal.

        Args:
            value: Initial value
            debug_label: Name used in logs and errors
            skip_equal: Skip notifying when an equal value is set
                (defaults to the configured notification policy)
        """
        notifications = get_config().notifications
        self.debug_label = debug_label
        self._value = value
        self._skip_equal = notifications.skip_equal if skip_equal is None else skip_equal
        self._listeners: List[Listener[T]] = []
        self._dispose_callbacks: List[Callable[[], None]] = []
        self._disposed = False

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def peek(self) -> T:
        """Read the current value."""
        return self._value

    def set(self, new_value: T, force: bool = False) -> bool:
        """
        Replace the value and notify subscribers.

        Args:
            new_value: Value to store
            force: Notify even if the value is equal to the current one

        Returns:
            True if subscribers were notified

        Raises:
            UseAfterDisposeError: If the signal was disposed
        """
        if self._disposed:
            raise UseAfterDisposeError(
                f"A disposed signal was written to: {self._label()}",
                debug_label=self.debug_label,
            )

        if self._skip_equal and not force and self._value == new_value:
            return False

        self._value = new_value
        logger.debug(f"Signal {self._label()} set to {new_value!r}")
        self._notify()
        return True

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        """
        Subscribe to value changes.

        Args:
            listener: Function called with the new value on change

        Returns:
            Unsubscribe function
        """
        if self._disposed:
            raise UseAfterDisposeError(
                f"Cannot subscribe to a disposed signal: {self._label()}",
                debug_label=self.debug_label,
            )

        # A listener whose first call raises is never registered
        if get_config().notifications.notify_on_subscribe:
            self._call(listener, self._value)

        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_dispose(self, callback: Callable[[], None]) -> Unsubscribe:
        """
        Register a callback run once when the signal is disposed.

        Raises:
            UseAfterDisposeError: If the signal was already disposed
        """
        if self._disposed:
            raise UseAfterDisposeError(
                f"Cannot register a dispose callback on a disposed signal: {self._label()}",
                debug_label=self.debug_label,
            )

        self._dispose_callbacks.append(callback)

        def remove():
            if callback in self._dispose_callbacks:
                self._dispose_callbacks.remove(callback)

        return remove

    def dispose(self) -> None:
        """Make the signal inert. Calling it again has no effect."""
        if self._disposed:
            return

        self._disposed = True
        self._listeners.clear()
        callbacks, self._dispose_callbacks = self._dispose_callbacks, []
        first_error: Optional[Exception] = None
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logger.error(f"Dispose callback error for {self._label()}: {e}")
                if first_error is None:
                    first_error = e
        logger.debug(f"Signal {self._label()} disposed")

        if first_error is not None and get_config().notifications.raise_subscriber_errors:
            raise first_error

    def _notify(self) -> None:
        """Notify subscribers of a change."""
        first_error: Optional[Exception] = None
        for listener in list(self._listeners):
            try:
                listener(self._value)
            except Exception as e:
                logger.error(f"Subscriber error for {self._label()}: {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None and get_config().notifications.raise_subscriber_errors:
            raise first_error

    def _call(self, listener: Listener[T], value: T) -> None:
        try:
            listener(value)
        except Exception as e:
            logger.error(f"Subscriber error for {self._label()}: {e}")
            if get_config().notifications.raise_subscriber_errors:
                raise

    def _label(self) -> str:
        return self.debug_label or f"<{type(self).__name__} {id(self):#x}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, label={self.debug_label!r})"
