"""Navigation service: drives the robot to named points of interest."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol

_SERVICE_PREFIX = "/NavigationComponent"
_CLIENT_GROUP = "NAVIGATION2D-CLIENT"
_NODE_NAME = "/NavigationComponentNode"


class NavigationStatus(enum.Enum):
    """State of the navigation system."""

    IDLE = enum.auto()
    PREPARING_BEFORE_MOVE = enum.auto()
    MOVING = enum.auto()
    WAITING_OBSTACLE = enum.auto()
    GOAL_REACHED = enum.auto()
    ABORTED = enum.auto()
    FAILING = enum.auto()
    PAUSED = enum.auto()
    THINKING = enum.auto()
    ERROR = enum.auto()


class Navigator(Protocol):
    """Interface of the navigation device the component drives."""

    def current_target(self) -> str | None:
        """Return the name of the current target, or None on failure."""

    def navigation_status(self) -> Any:
        """Return the navigation status, or None on failure."""

    def goto_target_by_location_name(self, name: str) -> bool:
        """Send the robot to a named location; False on failure."""

    def stop_navigation(self) -> bool:
        """Stop the robot; False on failure."""

    def check_near_to_location(self, name: str, distance: float) -> bool:
        """Tell whether the robot is within the distance of a named location."""


@dataclass(frozen=True)
class NavigationClientConfig:
    """Settings for opening the navigation client device."""

    device: str = "navigation2D_nwc_yarp"
    local: str = f"{_NODE_NAME}/navClient"
    navigation_server: str = "/navigation2D_nws_yarp"
    map_locations_server: str = "/map2D_nws_yarp"
    localization_server: str = "/localization2D_nws_yarp"
    period: int = 5

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "NavigationClientConfig":
        """Read the client group of a configuration, keeping defaults for what is absent."""
        group = config.get(_CLIENT_GROUP)
        if group is None:
            return cls()
        if not isinstance(group, Mapping):
            raise TypeError(f"{_CLIENT_GROUP} must be a group of settings")
        defaults = cls()
        local = defaults.local
        if "local-suffix" in group:
            local = _NODE_NAME + str(group["local-suffix"])
        return cls(
            device=str(group.get("device", defaults.device)),
            local=local,
            navigation_server=str(group.get("navigation_server", defaults.navigation_server)),
            map_locations_server=str(
                group.get("map_locations_server", defaults.map_locations_server)
            ),
            localization_server=str(
                group.get("localization_server", defaults.localization_server)
            ),
        )

    def as_properties(self) -> dict[str, Any]:
        """Return the device properties these settings describe."""
        return {
            "device": self.device,
            "local": self.local,
            "navigation_server": self.navigation_server,
            "map_locations_server": self.map_locations_server,
            "localization_server": self.localization_server,
            "period": self.period,
        }


@dataclass(frozen=True)
class NavigationResponse:
    """Reply of a navigation command."""

    is_ok: bool
    error_msg: str = ""


@dataclass(frozen=True)
class NavigationStatusResponse:
    """Reply carrying the current goal and navigation status."""

    is_ok: bool
    current_goal: str = ""
    status: NavigationStatus | None = None
    error_msg: str = ""


@dataclass(frozen=True)
class NearToPoiResponse:
    """Reply telling whether the robot is near a point of interest."""

    is_ok: bool
    is_near: bool = False
    error_msg: str = ""


class NavigationComponent:
    """Exposes a navigator as a set of services."""

    def __init__(self, navigator: Navigator) -> None:
        if navigator is None:
            raise ValueError("a navigator is required")
        self._navigator = navigator

    def go_to_poi_by_name(self, poi_name: str) -> NavigationResponse:
        """Send the robot to the named point of interest."""
        if poi_name == "":
            return NavigationResponse(False, "empty poi")
        if not self._navigator.goto_target_by_location_name(poi_name):
            return NavigationResponse(False, "failed to send goal")
        return NavigationResponse(True)

    def get_navigation_status(self) -> NavigationStatusResponse:
        """Report the current goal and navigation status."""
        target = self._navigator.current_target()
        if target is None:
            return NavigationStatusResponse(False, error_msg="failed to get target")
        status = self._navigator.navigation_status()
        if status is None:
            return NavigationStatusResponse(False, error_msg="failed to get status")
        if not isinstance(status, NavigationStatus):
            status = NavigationStatus.ERROR
        return NavigationStatusResponse(True, current_goal=target, status=status)

    def stop_navigation(self) -> NavigationResponse:
        """Stop the robot."""
        if not self._navigator.stop_navigation():
            return NavigationResponse(False, "failed to stop navigation")
        return NavigationResponse(True)

    def check_near_to_poi(self, poi_name: str, distance: float) -> NearToPoiResponse:
        """Tell whether the robot is within the distance of a point of interest."""
        if poi_name == "":
            return NearToPoiResponse(False, error_msg="empty poi")
        if not self._navigator.check_near_to_location(poi_name, distance):
            return NearToPoiResponse(True, is_near=False, error_msg="failed to check if nearby")
        return NearToPoiResponse(True, is_near=True)

    def services(self) -> dict[str, Callable[..., object]]:
        """Return the service handlers keyed by their service names."""
        return {
            f"{_SERVICE_PREFIX}/GoToPoiByName": self.go_to_poi_by_name,
            f"{_SERVICE_PREFIX}/GetNavigationStatus": self.get_navigation_status,
            f"{_SERVICE_PREFIX}/StopNavigation": self.stop_navigation,
            f"{_SERVICE_PREFIX}/CheckNearToPoi": self.check_near_to_poi,
        }