"""Scheduler service: walks through the active points of interest of a tour."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

from tourbot.tour import Tour
from tourbot.tour_storage import PathType, TourStorage

_SERVICE_PREFIX = "/SchedulerComponent"


@dataclass(frozen=True)
class StatusResponse:
    """Reply of a service that only reports success."""

    is_ok: bool


@dataclass(frozen=True)
class CurrentPoiResponse:
    """Reply carrying the current point of interest and its position."""

    poi_name: str
    poi_number: int
    is_ok: bool


class SchedulerComponent:
    """Keeps track of the current point of interest in the loaded tour."""

    def __init__(self, tour_path: PathType | None = None, tour_name: str | None = None) -> None:
        self._lock = threading.Lock()
        self._current_poi = 0
        self._storage = TourStorage()
        if tour_path is not None:
            if tour_name is None:
                raise ValueError("a tour name is needed to load a tours file")
            self._storage.load_tour(tour_path, tour_name)

    @property
    def tour(self) -> Tour:
        """The loaded tour."""
        return self._storage.loaded_tour

    @property
    def current_poi(self) -> int:
        """Position of the current point of interest in the active list."""
        return self._current_poi

    def reset(self) -> StatusResponse:
        """Go back to the first point of interest."""
        with self._lock:
            self._current_poi = 0
        return StatusResponse(is_ok=True)

    def update_poi(self) -> StatusResponse:
        """Move to the next point of interest, wrapping round at the end."""
        with self._lock:
            count = len(self.tour.pois_list())
            if count == 0:
                raise LookupError("the loaded tour has no active points of interest")
            self._current_poi = (self._current_poi + 1) % count
        return StatusResponse(is_ok=True)

    def get_current_poi(self) -> CurrentPoiResponse:
        """Return the name and position of the current point of interest."""
        with self._lock:
            pois = self.tour.pois_list()
            if not 0 <= self._current_poi < len(pois):
                raise LookupError(
                    f"no active point of interest at position {self._current_poi}"
                )
            return CurrentPoiResponse(
                poi_name=pois[self._current_poi],
                poi_number=self._current_poi,
                is_ok=True,
            )

    def services(self) -> dict[str, Callable[[], object]]:
        """Return the service handlers keyed by their service names."""
        return {
            f"{_SERVICE_PREFIX}/UpdatePoi": self.update_poi,
            f"{_SERVICE_PREFIX}/Reset": self.reset,
            f"{_SERVICE_PREFIX}/GetCurrentPoi": self.get_current_poi,
        }