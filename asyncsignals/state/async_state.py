"""
asyncsignals Async State

Immutable container for a value produced over time.

A state is in one of three phases:
- SETTLED: resolved with data, an error, or both (error over stale data)
- LOADING: in flight, optionally still holding a previous value or error
- RELOADING: recomputing while a previous value or error is held

Payloads are boxed so that presence never depends on truthiness:
AsyncState.data(None) holds a value.
"""

from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar
from dataclasses import dataclass, replace
from enum import Enum
from types import TracebackType

from ..errors import UnwrapError


T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")

DataBuilder = Callable[[T], R]
ErrorBuilder = Callable[[E, Optional[TracebackType]], R]
StateBuilder = Callable[[], R]


class _Missing:
    """Marker for an argument that was not supplied."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# =============================================================================
# Phase and Payloads
# =============================================================================

class AsyncPhase(str, Enum):
    """Lifecycle phase of an AsyncState."""
    SETTLED = "settled"
    LOADING = "loading"
    RELOADING = "reloading"


@dataclass(frozen=True)
class Data(Generic[T]):
    """A resolved value."""
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A resolved error and the traceback it was raised with, if any."""
    error: E
    stack_trace: Optional[TracebackType] = None


# =============================================================================
# Async State
# =============================================================================

@dataclass(frozen=True, repr=False)
class AsyncState(Generic[T, E]):
    """
    Tri-state value container: loading, data or error.

    Classify a state through the predicates (has_value, has_error,
    is_loading, is_reloading, is_refreshing) or through map/maybe_map,
    since a state can hold stale data or a stale error while loading.
    """
    phase: AsyncPhase = AsyncPhase.SETTLED
    held_data: Optional[Data[T]] = None
    held_failure: Optional[Failure[E]] = None

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def loading(cls) -> AsyncState[T, E]:
        """Pending state with nothing held."""
        return cls(phase=AsyncPhase.LOADING)

    @classmethod
    def data(cls, value: T) -> AsyncState[T, E]:
        """Settled state holding value."""
        return cls(held_data=Data(value))

    @classmethod
    def failure(
        cls,
        error: E,
        stack_trace: Optional[TracebackType] = None,
    ) -> AsyncState[T, E]:
        """Settled state holding error."""
        return cls(held_failure=Failure(error, stack_trace))

    @classmethod
    def create(
        cls,
        value: Any = MISSING,
        error: Any = MISSING,
        stack_trace: Optional[TracebackType] = None,
        is_loading: bool = False,
        is_reloading: bool = False,
    ) -> AsyncState[T, E]:
        """
        Build a state from individual fields.

        Args:
            value: Held value; omit for none
            error: Held error; omit for none
            stack_trace: Traceback for error
            is_loading: Pending flag
            is_reloading: Recomputing flag

        Raises:
            ValueError: If both flags are set, or a stack trace is given without an error
        """
        if is_loading and is_reloading:
            raise ValueError("A state cannot be loading and reloading at once")
        if error is MISSING and stack_trace is not None:
            raise ValueError("A stack trace requires an error")

        if is_reloading:
            phase = AsyncPhase.RELOADING
        elif is_loading:
            phase = AsyncPhase.LOADING
        else:
            phase = AsyncPhase.SETTLED

        return cls(
            phase=phase,
            held_data=None if value is MISSING else Data(value),
            held_failure=None if error is MISSING else Failure(error, stack_trace),
        )

    # =========================================================================
    # Field Views
    # =========================================================================

    @property
    def value(self) -> Optional[T]:
        """Held value, or None when absent. Use has_value to test presence."""
        return self.held_data.value if self.held_data is not None else None

    @property
    def error(self) -> Optional[E]:
        """Held error, or None when absent."""
        return self.held_failure.error if self.held_failure is not None else None

    @property
    def stack_trace(self) -> Optional[TracebackType]:
        return self.held_failure.stack_trace if self.held_failure is not None else None

    @property
    def is_loading(self) -> bool:
        return self.phase is AsyncPhase.LOADING

    @property
    def is_reloading(self) -> bool:
        return self.phase is AsyncPhase.RELOADING

    # =========================================================================
    # Predicates
    # =========================================================================

    @property
    def has_value(self) -> bool:
        return self.held_data is not None

    @property
    def has_error(self) -> bool:
        return self.held_failure is not None

    @property
    def is_refreshing(self) -> bool:
        """True when loading while a previous value or error is held."""
        return self.is_loading and (self.has_value or self.has_error)

    @property
    def require_value(self) -> T:
        """
        Force unwrap the held value.

        Raises:
            UnwrapError: If no value is held
        """
        if self.held_data is None:
            raise UnwrapError(f"No value present in {self!r}")
        return self.held_data.value

    # =========================================================================
    # Transitions
    # =========================================================================

    def with_error(
        self,
        error: E,
        stack_trace: Optional[TracebackType] = None,
    ) -> AsyncState[T, E]:
        """Settle with error, keeping any held value."""
        return replace(
            self,
            phase=AsyncPhase.SETTLED,
            held_failure=Failure(error, stack_trace),
        )

    def with_value(self, value: T) -> AsyncState[T, E]:
        """Settle with value, dropping any held error."""
        return replace(
            self,
            phase=AsyncPhase.SETTLED,
            held_data=Data(value),
            held_failure=None,
        )

    def with_loading(self) -> AsyncState[T, E]:
        """Start loading, keeping held value and error."""
        return replace(self, phase=AsyncPhase.LOADING)

    def with_reloading(self) -> AsyncState[T, E]:
        """Start reloading, keeping held value and error."""
        return replace(self, phase=AsyncPhase.RELOADING)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def map(
        self,
        *,
        data: DataBuilder[T, R],
        error: ErrorBuilder[E, R],
        loading: StateBuilder[R],
        reloading: Optional[StateBuilder[R]] = None,
        refreshing: Optional[StateBuilder[R]] = None,
    ) -> R:
        """
        Map the state to a result, handling every case.

        Order: reloading and refreshing (only when supplied), then data,
        then error, then loading. A held value wins over a held error.

        Example:
            state.map(
                data=lambda v: f"Value: {v}",
                error=lambda e, tb: f"Error: {e}",
                loading=lambda: "Loading...",
            )
        """
        if self.is_reloading and reloading is not None:
            return reloading()
        if self.is_refreshing and refreshing is not None:
            return refreshing()
        if self.held_data is not None:
            return data(self.held_data.value)
        if self.held_failure is not None:
            return error(self.held_failure.error, self.held_failure.stack_trace)
        return loading()

    def maybe_map(
        self,
        *,
        or_else: StateBuilder[R],
        data: Optional[DataBuilder[T, R]] = None,
        error: Optional[ErrorBuilder[E, R]] = None,
        loading: Optional[StateBuilder[R]] = None,
        reloading: Optional[StateBuilder[R]] = None,
        refreshing: Optional[StateBuilder[R]] = None,
    ) -> R:
        """
        Map the state to a result, with or_else for unhandled cases.

        Same order as map. Each case applies only when its branch is
        supplied; loading applies only when is_loading is set.
        """
        if self.is_reloading and reloading is not None:
            return reloading()
        if self.is_refreshing and refreshing is not None:
            return refreshing()
        if self.held_data is not None and data is not None:
            return data(self.held_data.value)
        if self.held_failure is not None and error is not None:
            return error(self.held_failure.error, self.held_failure.stack_trace)
        if self.is_loading and loading is not None:
            return loading()
        return or_else()

    def __repr__(self) -> str:
        parts = [self.phase.value]
        if self.held_data is not None:
            parts.append(f"value={self.held_data.value!r}")
        if self.held_failure is not None:
            parts.append(f"error={self.held_failure.error!r}")
        return f"AsyncState({', '.join(parts)})"
