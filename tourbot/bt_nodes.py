"""Behaviour-tree leaves that forward ticks and halts to remote skills."""

from __future__ import annotations

import enum
import logging
import threading
import time
from typing import Any, Callable, Mapping, Protocol

logger = logging.getLogger(__name__)

_PORT_NODE_NAME = "nodeName"
_PORT_INTERFACE = "interface"
_PORT_IS_MONITORED = "isMonitored"
_MONITOR_SUFFIX = "_mon"


class NodeStatus(enum.Enum):
    """Result of ticking a behaviour-tree node."""

    IDLE = enum.auto()
    RUNNING = enum.auto()
    SUCCESS = enum.auto()
    FAILURE = enum.auto()


class SkillStatus(enum.Enum):
    """Status a skill reports back for a tick."""

    SKILL_RUNNING = enum.auto()
    SKILL_SUCCESS = enum.auto()
    SKILL_FAILURE = enum.auto()


class ServiceUnavailableError(RuntimeError):
    """Raised when a skill service cannot be reached or a call does not complete."""


class SkillClient(Protocol):
    """Client of one skill service."""

    def wait_for_service(self, timeout: float) -> bool:
        """Wait up to timeout seconds for the service; True once it is available."""

    def call(self) -> Any:
        """Send a request and return the reply; raise ServiceUnavailableError on failure."""


Connector = Callable[[str], SkillClient]


def _always_ok() -> bool:
    return True


def _read_ports(ports: Mapping[str, str]) -> tuple[str, str, str | None]:
    """Return the skill name, the monitor suffix and the interface from the ports."""
    node_name = ports.get(_PORT_NODE_NAME, "")
    if _PORT_IS_MONITORED not in ports:
        raise KeyError(f"input port {_PORT_IS_MONITORED!r} is required")
    suffix = _MONITOR_SUFFIX if ports[_PORT_IS_MONITORED] == "true" else ""
    return node_name, suffix, ports.get(_PORT_INTERFACE)


class _SkillLeaf:
    """Common state of the leaves that talk to a skill."""

    def __init__(
        self,
        name: str,
        ports: Mapping[str, str],
        connect: Connector,
        is_ok: Callable[[], bool],
        wait_timeout: float,
        settle_delay: float,
    ) -> None:
        self.name = name
        self.node_name, self.suffix_monitor, self.interface = _read_ports(ports)
        self.leaf_name = f"{self.node_name}Leaf"
        self.tick_service_name = f"{self.node_name}Skill/tick{self.suffix_monitor}"
        self._connect = connect
        self._is_ok = is_ok
        self._wait_timeout = wait_timeout
        self._settle_delay = settle_delay
        self._lock = threading.Lock()
        self._tick_client = connect(self.tick_service_name)
        logger.info("name %s suffixmonitor %s", self.node_name, self.suffix_monitor)

    @staticmethod
    def provided_ports() -> tuple[str, ...]:
        """Names of the input ports the node reads."""
        return (_PORT_NODE_NAME, _PORT_INTERFACE, _PORT_IS_MONITORED)

    def _wait(self, client: SkillClient, service: str) -> bool:
        """Wait for a service; False if the context shut down meanwhile."""
        while not client.wait_for_service(self._wait_timeout):
            if not self._is_ok():
                logger.error("Interrupted while waiting for the service %s.", service)
                return False
            logger.info("service %s not available, waiting again...", service)
        return True

    def _request_tick(self, service: str) -> Any:
        if not self._wait(self._tick_client, service):
            return SkillStatus.SKILL_FAILURE
        if self._settle_delay:
            time.sleep(self._settle_delay)
        try:
            return self._tick_client.call()
        except ServiceUnavailableError:
            return SkillStatus.SKILL_FAILURE


class SkillAction(_SkillLeaf):
    """Action leaf whose outcome is decided by a remote skill."""

    def __init__(
        self,
        name: str,
        ports: Mapping[str, str],
        connect: Connector,
        is_ok: Callable[[], bool] = _always_ok,
        wait_timeout: float = 1.0,
        settle_delay: float = 0.1,
    ) -> None:
        super().__init__(name, ports, connect, is_ok, wait_timeout, settle_delay)
        self.halt_service_name = f"{self.node_name}Skill/halt{self.suffix_monitor}"
        self._halt_client = connect(self.halt_service_name)

    @staticmethod
    def provided_ports() -> tuple[str, ...]:
        """Names of the input ports the node reads."""
        return _SkillLeaf.provided_ports()

    def send_tick_to_skill(self) -> Any:
        """Tick the skill and return the status it reports."""
        return self._request_tick("TickAction")

    def tick(self) -> NodeStatus:
        """Tick the skill and translate its status into a node status."""
        with self._lock:
            logger.info("Node %s sending tick to skill", self.name)
            status = self.send_tick_to_skill()
        if status is SkillStatus.SKILL_RUNNING:
            return NodeStatus.RUNNING
        if status is SkillStatus.SKILL_SUCCESS:
            return NodeStatus.SUCCESS
        return NodeStatus.FAILURE

    def halt(self) -> None:
        """Ask the skill to halt, retrying until the request completes."""
        while True:
            logger.info("Node %s sending halt to skill", self.name)
            if not self._wait(self._halt_client, "HaltAction"):
                raise ServiceUnavailableError(
                    f"interrupted while waiting for {self.halt_service_name}"
                )
            if self._settle_delay:
                time.sleep(self._settle_delay)
            try:
                self._halt_client.call()
            except ServiceUnavailableError:
                continue
            return


class SkillCondition(_SkillLeaf):
    """Condition leaf whose outcome is decided by a remote skill."""

    def __init__(
        self,
        name: str,
        ports: Mapping[str, str],
        connect: Connector,
        is_ok: Callable[[], bool] = _always_ok,
        wait_timeout: float = 1.0,
        settle_delay: float = 0.1,
    ) -> None:
        super().__init__(name, ports, connect, is_ok, wait_timeout, settle_delay)

    @staticmethod
    def provided_ports() -> tuple[str, ...]:
        """Names of the input ports the node reads."""
        return _SkillLeaf.provided_ports()

    def send_tick_to_skill(self) -> Any:
        """Tick the skill and return the status it reports."""
        with self._lock:
            return self._request_tick("TickCondition")

    def tick(self) -> NodeStatus:
        """Tick the skill; anything but success counts as failure."""
        logger.info("Node %s sending tick to skill", self.name)
        status = self.send_tick_to_skill()
        if status is SkillStatus.SKILL_SUCCESS:
            return NodeStatus.SUCCESS
        return NodeStatus.FAILURE


class FlipFlopCondition:
    """Condition that succeeds thirty times, then fails once, and repeats."""

    registration_id = "FlipFlopCondition"
    _SUCCESSES = 30

    def __init__(self, name: str) -> None:
        self.name = name
        self._count = 0

    def tick(self) -> NodeStatus:
        """Return success until the run of successes is used up, then one failure."""
        succeeded = self._count < self._SUCCESSES
        self._count += 1
        if succeeded:
            logger.info("condition true")
            return NodeStatus.SUCCESS
        self._count = 0
        logger.info("condition false")
        return NodeStatus.FAILURE


class AlwaysRunning:
    """Action that never finishes."""

    registration_id = "AlwaysRunning"

    def __init__(self, name: str) -> None:
        self.name = name
        self.halted = False

    def tick(self) -> NodeStatus:
        """Report that the action is still running."""
        self.halted = False
        logger.info("Action Ticked")
        return NodeStatus.RUNNING

    def halt(self) -> None:
        """Mark the action as halted."""
        self.halted = True
        logger.info("Action halted")