"""One-time execution primitive."""
import threading
from typing import Callable


class Once:
    """
    Runs a function at most once, no matter how many threads call ``do``.

    Callers that arrive while the function is running block until it
    finishes. The function counts as done even if it raised, so it is never
    retried.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def do(self, fn: Callable[[], None]) -> None:
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            try:
                fn()
            finally:
                self._done = True
