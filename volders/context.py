"""
Cancellation context for long-running repository operations.

A Context carries a cancel flag and an optional deadline. Callers hand it to
operations such as VolderRepository.get_folder_hierarchy() and may cancel it
from another thread; the operation polls it and stops with
OperationCancelledError.
"""

import threading
import time
from typing import Optional

from volders.config import HIERARCHY_TIMEOUT_SECONDS
from volders.exceptions import OperationCancelledError


class Context:
    """
    Thread-safe cancel flag with an optional deadline.

    Usage:
        ctx = Context(timeout=5.0)
        folders = repo.get_folder_hierarchy(ctx, folder_id)

        # from another thread
        ctx.cancel()
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize context.

        Args:
            timeout: Seconds until the deadline passes, or None for no deadline
        """
        self._cancel_event = threading.Event()
        self._deadline: Optional[float] = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    @classmethod
    def background(cls) -> "Context":
        """Context that is never cancelled unless cancel() is called."""
        return cls()

    @classmethod
    def with_default_timeout(cls) -> "Context":
        """Context using VOLDERS_HIERARCHY_TIMEOUT_SECONDS as its deadline."""
        if HIERARCHY_TIMEOUT_SECONDS > 0:
            return cls(timeout=HIERARCHY_TIMEOUT_SECONDS)
        return cls()

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def deadline_exceeded(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def is_cancelled(self) -> bool:
        """True once cancel() was called or the deadline has passed."""
        return self._cancel_event.is_set() or self.deadline_exceeded

    def check(self) -> None:
        """
        Raise if the context is no longer live.

        Raises:
            OperationCancelledError: If cancelled or past the deadline
        """
        if self._cancel_event.is_set():
            raise OperationCancelledError("context cancelled")
        if self.deadline_exceeded:
            raise OperationCancelledError("context deadline exceeded")
