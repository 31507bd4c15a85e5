import logging

import pytest

from tourbot.bt_nodes import (
    AlwaysRunning,
    FlipFlopCondition,
    NodeStatus,
    ServiceUnavailableError,
    SkillAction,
    SkillCondition,
    SkillStatus,
)


class FakeClient:
    def __init__(self):
        self.results = []
        self.available = []
        self.calls = 0
        self.waits = 0

    def wait_for_service(self, timeout):
        self.waits += 1
        return self.available.pop(0) if self.available else True

    def call(self):
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class Connector:
    def __init__(self):
        self.clients = {}

    def __call__(self, service):
        client = FakeClient()
        self.clients[service] = client
        return client


PORTS = {"nodeName": "goTo", "isMonitored": "true", "interface": "srv"}


def make_action(ports=PORTS, **kwargs):
    connector = Connector()
    node = SkillAction("GoTo", ports, connector, settle_delay=0, **kwargs)
    return node, connector


def make_condition(ports=PORTS, **kwargs):
    connector = Connector()
    node = SkillCondition("IsAt", ports, connector, settle_delay=0, **kwargs)
    return node, connector


def test_monitored_service_names():
    node, connector = make_action()
    assert node.tick_service_name == "goToSkill/tick_mon"
    assert node.halt_service_name == "goToSkill/halt_mon"
    assert set(connector.clients) == {"goToSkill/tick_mon", "goToSkill/halt_mon"}
    assert node.leaf_name == "goToLeaf"


def test_unmonitored_service_names():
    node, _ = make_condition({"nodeName": "battery", "isMonitored": "false"})
    assert node.tick_service_name == "batterySkill/tick"


def test_missing_is_monitored_raises():
    with pytest.raises(KeyError):
        make_action({"nodeName": "goTo"})


def test_provided_ports():
    expected = ("nodeName", "interface", "isMonitored")
    assert SkillAction.provided_ports() == expected
    assert SkillCondition.provided_ports() == expected


@pytest.mark.parametrize(
    "status, expected",
    [
        (SkillStatus.SKILL_RUNNING, NodeStatus.RUNNING),
        (SkillStatus.SKILL_SUCCESS, NodeStatus.SUCCESS),
        (SkillStatus.SKILL_FAILURE, NodeStatus.FAILURE),
        ("unknown", NodeStatus.FAILURE),
    ],
)
def test_action_tick_maps_status(status, expected):
    node, connector = make_action()
    connector.clients["goToSkill/tick_mon"].results.append(status)
    assert node.tick() is expected


@pytest.mark.parametrize(
    "status, expected",
    [
        (SkillStatus.SKILL_RUNNING, NodeStatus.FAILURE),
        (SkillStatus.SKILL_SUCCESS, NodeStatus.SUCCESS),
        (SkillStatus.SKILL_FAILURE, NodeStatus.FAILURE),
    ],
)
def test_condition_tick_maps_status(status, expected):
    node, connector = make_condition()
    connector.clients["goToSkill/tick_mon"].results.append(status)
    assert node.tick() is expected


def test_failed_call_counts_as_failure():
    node, connector = make_action()
    connector.clients["goToSkill/tick_mon"].results.append(ServiceUnavailableError())
    assert node.send_tick_to_skill() is SkillStatus.SKILL_FAILURE


def test_waits_until_service_available():
    node, connector = make_condition()
    client = connector.clients["goToSkill/tick_mon"]
    client.available = [False, False, True]
    client.results.append(SkillStatus.SKILL_SUCCESS)
    assert node.send_tick_to_skill() is SkillStatus.SKILL_SUCCESS
    assert client.waits == 3


def test_shutdown_while_waiting_returns_failure():
    node, connector = make_action(is_ok=lambda: False)
    client = connector.clients["goToSkill/tick_mon"]
    client.available = [False]
    assert node.send_tick_to_skill() is SkillStatus.SKILL_FAILURE
    assert client.calls == 0


def test_halt_retries_until_success():
    node, connector = make_action()
    client = connector.clients["goToSkill/halt_mon"]
    client.results = [ServiceUnavailableError(), None]
    node.halt()
    assert client.calls == 2


def test_halt_raises_when_shut_down():
    node, connector = make_action(is_ok=lambda: False)
    connector.clients["goToSkill/halt_mon"].available = [False]
    with pytest.raises(ServiceUnavailableError):
        node.halt()


def test_flip_flop_cycle():
    node = FlipFlopCondition("flip")
    results = [node.tick() for _ in range(31)]
    assert results[:30] == [NodeStatus.SUCCESS] * 30
    assert results[30] is NodeStatus.FAILURE
    assert node.tick() is NodeStatus.SUCCESS


def test_always_running(caplog):
    node = AlwaysRunning("run")
    assert node.tick() is NodeStatus.RUNNING
    with caplog.at_level(logging.INFO, logger="tourbot.bt_nodes"):
        node.halt()
    assert "Action halted" in caplog.messages