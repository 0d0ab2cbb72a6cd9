# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Any, Callable, Optional, Protocol, TypeAlias

log = logging.getLogger(__name__)


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory: TypeAlias = Callable[[float, Callable[[], None]], Timer]


def daemon_timer(delay: float, function: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, function)
    timer.daemon = True
    return timer


class DebouncedTask:
    """
    Run an action once things have been quiet for ``delay`` seconds.

    At most one run is pending at a time: every ``schedule()`` cancels the
    pending timer and starts a fresh one.
    """

    def __init__(
        self,
        action: Callable[[], Any],
        delay: float = 1.0,
        timer_factory: TimerFactory = daemon_timer,
    ) -> None:
        self._action = action
        self._delay = delay
        self._timer_factory = timer_factory
        self._timer: Optional[Timer] = None
        self._generation = 0
        self._lock = threading.Lock()
        self._running = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def schedule(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._timer = self._timer_factory(
                self._delay, lambda: self.__fire(generation)
            )
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> bool:
        """
        Run the pending action now. Returns False when nothing was pending.

        A run already started by the timer is waited for before returning.
        """
        with self._lock:
            pending = self._timer is not None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        with self._running:
            if pending:
                self._action()
        return pending

    def __fire(self, generation: int) -> None:
        with self._lock:
            # Superseded by a later schedule() or already flushed
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            # Taken before the state lock is released so flush() cannot slip in
            self._running.acquire()
        try:
            self._action()
        except Exception:
            log.exception("Debounced action failed")
        finally:
            self._running.release()
