"""Alarm service: raises a repeating alarm until it is told to stop."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

_SERVICE_PREFIX = "/AlarmComponent"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlarmResponse:
    """Reply of the alarm services."""

    is_ok: bool


class AlarmComponent:
    """Runs an alarm in a background thread between start and stop requests."""

    def __init__(self, interval: float = 0.5) -> None:
        if interval < 0:
            raise ValueError("the alarm interval cannot be negative")
        self._interval = interval
        self._lock = threading.Lock()
        self._active = threading.Event()
        self._threads: list[threading.Thread] = []

    @property
    def is_active(self) -> bool:
        """Whether the alarm is currently sounding."""
        return self._active.is_set()

    def _sound(self) -> None:
        while self._active.is_set():
            logger.info("alarm")
            time.sleep(self._interval)
        time.sleep(self._interval)

    def start_alarm(self) -> AlarmResponse:
        """Start sounding the alarm."""
        with self._lock:
            self._active.set()
            thread = threading.Thread(target=self._sound, name="alarm", daemon=True)
            thread.start()
            self._threads.append(thread)
        logger.info("----------------------- alarm started ------------------------------")
        return AlarmResponse(is_ok=True)

    def stop_alarm(self) -> AlarmResponse:
        """Stop the alarm and wait for it to finish; raise if it was never started."""
        with self._lock:
            if not self._threads:
                raise RuntimeError("the alarm is not running")
            self._active.clear()
            for thread in self._threads:
                thread.join()
            self._threads.clear()
        return AlarmResponse(is_ok=True)

    def close(self) -> None:
        """Stop the alarm if it is still running."""
        with self._lock:
            running = bool(self._threads)
        if running:
            self.stop_alarm()

    def services(self) -> dict[str, Callable[[], AlarmResponse]]:
        """Return the service handlers keyed by their service names."""
        return {
            f"{_SERVICE_PREFIX}/StartAlarm": self.start_alarm,
            f"{_SERVICE_PREFIX}/StopAlarm": self.stop_alarm,
        }