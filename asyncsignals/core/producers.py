"""
asyncsignals Producers

Coroutines that drive an AsyncSignal from an asynchronous source.
They run on the event loop and write between awaits, so writes to a
signal are never interleaved.
"""

from __future__ import annotations
from typing import AsyncIterable, Awaitable, Callable, TypeVar
import logging

from .event_sink import AsyncSignal
from ..state.async_state import AsyncState


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def pipe_stream(
    source: AsyncIterable[T],
    sink: AsyncSignal[T, Exception],
    *,
    close_on_done: bool = True,
) -> None:
    """
    Forward every item of an async iterable into a sink.

    Args:
        source: Items to forward with add()
        sink: Destination signal
        close_on_done: Close the sink once the source is exhausted or fails

    An exception raised by the source is forwarded with add_error() and ends
    the stream. Exceptions raised by the sink's subscribers propagate to the
    caller and leave the sink open. Cancellation propagates without touching
    the sink.
    """
    label = sink.debug_label or "sink"
    logger.debug(f"Piping stream into {label}")

    iterator = source.__aiter__()
    while True:
        # Only the source's own failures become error states
        try:
            item = await iterator.__anext__()
        except StopAsyncIteration:
            break
        except Exception as e:
            if sink.disposed:
                raise
            logger.debug(f"Stream for {label} failed: {e}")
            sink.add_error(e, e.__traceback__)
            break

        if sink.disposed:
            logger.debug(f"Sink {label} disposed, stopping stream")
            return
        sink.add(item)

    if close_on_done:
        sink.close()
        logger.debug(f"Stream for {label} closed")


async def run_request(
    fetch: Callable[[], Awaitable[T]],
    signal: AsyncSignal[T, Exception],
) -> AsyncState[T, Exception]:
    """
    Run a single request and publish its outcome.

    The signal moves to loading on first use, or to reloading when a value
    or error is already held, then receives the result or the exception.

    Args:
        fetch: Coroutine function producing the value
        signal: Destination signal

    Returns:
        The signal's state after the request
    """
    current = signal.value
    if current.has_value or current.has_error:
        signal.set_reloading()
    else:
        signal.set(AsyncState.loading())

    try:
        result = await fetch()
    except Exception as e:
        if signal.disposed:
            logger.debug(f"Dropping error for disposed signal {signal.debug_label}: {e}")
            return signal.value
        signal.add_error(e, e.__traceback__)
        return signal.value

    if signal.disposed:
        logger.debug(f"Dropping result for disposed signal {signal.debug_label}")
        return signal.value

    signal.add(result)
    return signal.value
