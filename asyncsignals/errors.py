"""
asyncsignals Errors

Exception taxonomy shared by the state container and the observable cell.
"""

from typing import Optional


class AsyncSignalsError(Exception):
    """Base class for all asyncsignals errors."""
    pass


class UnwrapError(AsyncSignalsError):
    """Raised when a value is required from a state that holds none."""
    pass


class UseAfterDisposeError(AsyncSignalsError):
    """A disposed signal was written to or subscribed to."""
    
    def __init__(self, message: str, debug_label: Optional[str] = None):
        super().__init__(message)
        self.debug_label = debug_label
