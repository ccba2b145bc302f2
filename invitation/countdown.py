"""Countdown to the event end and the one-way phase transition."""

import logging
import math
import threading
import time
from typing import Callable, Optional

from invitation.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    TICK_INTERVAL,
)
from invitation.models.countdown import CountdownSnapshot, Phase, TimeParts

logger = logging.getLogger(__name__)

Observer = Callable[[CountdownSnapshot], None]


def current_millis() -> float:
    """Wall-clock time in epoch milliseconds."""
    return time.time() * 1000


def decompose(milliseconds: int) -> TimeParts:
    """
    Split a non-negative duration into days, hours, minutes and seconds.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        TimeParts with each component floored

    Raises:
        ValueError: If the duration is negative
    """
    m = int(milliseconds)
    if m < 0:
        raise ValueError(f"Duration must be non-negative, got {milliseconds}")

    return TimeParts(
        days=m // MS_PER_DAY,
        hours=(m % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(m % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(m % MS_PER_MINUTE) // MS_PER_SECOND,
    )


class CountdownClock:
    """Remaining time to a fixed target and the derived phase.

    Each tick samples the clock function and publishes a snapshot to the
    subscribed observers. Once the target passes the phase becomes
    PROPOSAL and stays there for every later tick.
    """

    def __init__(
        self,
        target_ms: float,
        now: Callable[[], float] = current_millis,
        initial_phase: Phase = Phase.INVITATION,
    ):
        """
        Initialize CountdownClock.

        Args:
            target_ms: Target instant in epoch milliseconds
            now: Returns the current time in epoch milliseconds
            initial_phase: Phase before the target passes
        """
        self.target_ms = target_ms
        self._now = now
        self._phase = initial_phase
        self._remaining_ms = 0
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    def snapshot(self) -> CountdownSnapshot:
        """Current values without ticking."""
        return CountdownSnapshot(
            remaining_ms=self._remaining_ms,
            parts=decompose(self._remaining_ms),
            phase=self._phase,
        )

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer for published snapshots.

        Returns:
            Function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def tick(self) -> CountdownSnapshot:
        """Recompute the remaining time and publish it."""
        with self._lock:
            remaining = self.target_ms - self._now()
            # Malformed targets expire at once
            remaining = int(remaining) if math.isfinite(remaining) else 0
            if remaining > 0:
                self._remaining_ms = remaining
            else:
                self._remaining_ms = 0
                if self._phase is not Phase.PROPOSAL:
                    logger.info("Countdown reached zero, switching to proposal")
                    self._phase = Phase.PROPOSAL
            snapshot = self.snapshot()

        for observer in list(self._observers):
            observer(snapshot)
        return snapshot


class ClockTicker:
    """Ticks a CountdownClock on a background thread until cancelled.

    Usage:
        with ClockTicker(clock):
            ...  # clock ticks every second here
    """

    def __init__(self, clock: CountdownClock, interval: float = TICK_INTERVAL):
        self.clock = clock
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "ClockTicker":
        """Start ticking: once immediately, then every interval."""
        if self._thread is not None:
            raise RuntimeError("Ticker already started")

        self._thread = threading.Thread(
            target=self._run, name="countdown-ticker", daemon=True
        )
        self._thread.start()
        logger.debug(f"Ticker started (interval {self.interval}s)")
        return self

    def cancel(self) -> None:
        """Stop ticking. Safe to call more than once."""
        if self._stop.is_set():
            return
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        logger.debug("Ticker cancelled")

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.clock.tick()
            except Exception:
                logger.exception("Countdown tick failed")
            if self._stop.wait(self.interval):
                break

    def __enter__(self) -> "ClockTicker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()
