import pytest

from tourbot.navigation import (
    NavigationClientConfig,
    NavigationComponent,
    NavigationResponse,
    NavigationStatus,
    NavigationStatusResponse,
    NearToPoiResponse,
)


class FakeNavigator:
    def __init__(self, target="entrance", status=NavigationStatus.IDLE,
                 goto_ok=True, stop_ok=True, near=True):
        self.target = target
        self.status = status
        self.goto_ok = goto_ok
        self.stop_ok = stop_ok
        self.near = near
        self.goals = []
        self.near_checks = []
        self.stops = 0

    def current_target(self):
        return self.target

    def navigation_status(self):
        return self.status

    def goto_target_by_location_name(self, name):
        self.goals.append(name)
        return self.goto_ok

    def stop_navigation(self):
        self.stops += 1
        return self.stop_ok

    def check_near_to_location(self, name, distance):
        self.near_checks.append((name, distance))
        return self.near


def test_config_defaults_without_group():
    config = NavigationClientConfig.from_config({})
    assert config.device == "navigation2D_nwc_yarp"
    assert config.local == "/NavigationComponentNode/navClient"
    assert config.navigation_server == "/navigation2D_nws_yarp"
    assert config.map_locations_server == "/map2D_nws_yarp"
    assert config.localization_server == "/localization2D_nws_yarp"
    assert config.period == 5


def test_config_reads_group_values():
    config = NavigationClientConfig.from_config({
        "NAVIGATION2D-CLIENT": {
            "device": "fakeNav",
            "local-suffix": "/client",
            "navigation_server": "/navServer",
            "map_locations_server": "/mapServer",
            "localization_server": "/locServer",
        }
    })
    assert config.device == "fakeNav"
    assert config.local == "/NavigationComponentNode/client"
    assert config.navigation_server == "/navServer"
    assert config.map_locations_server == "/mapServer"
    assert config.localization_server == "/locServer"


def test_config_partial_group_keeps_defaults():
    config = NavigationClientConfig.from_config({"NAVIGATION2D-CLIENT": {"device": "fakeNav"}})
    assert config.device == "fakeNav"
    assert config.local == NavigationClientConfig().local
    assert config.navigation_server == NavigationClientConfig().navigation_server


def test_config_properties_round_trip():
    config = NavigationClientConfig.from_config({"NAVIGATION2D-CLIENT": {"device": "fakeNav"}})
    props = config.as_properties()
    assert props["device"] == "fakeNav"
    assert props["period"] == 5
    assert NavigationClientConfig(**props) == config


def test_config_rejects_non_group():
    with pytest.raises(TypeError):
        NavigationClientConfig.from_config({"NAVIGATION2D-CLIENT": "nope"})


def test_component_requires_navigator():
    with pytest.raises(ValueError):
        NavigationComponent(None)


def test_go_to_empty_poi():
    nav = FakeNavigator()
    response = NavigationComponent(nav).go_to_poi_by_name("")
    assert response == NavigationResponse(False, "empty poi")
    assert nav.goals == []


def test_go_to_poi_failure():
    nav = FakeNavigator(goto_ok=False)
    response = NavigationComponent(nav).go_to_poi_by_name("kitchen")
    assert response == NavigationResponse(False, "failed to send goal")
    assert nav.goals == ["kitchen"]


def test_go_to_poi_success():
    nav = FakeNavigator()
    response = NavigationComponent(nav).go_to_poi_by_name("kitchen")
    assert response.is_ok is True
    assert response.error_msg == ""
    assert nav.goals == ["kitchen"]


def test_status_target_failure():
    response = NavigationComponent(FakeNavigator(target=None)).get_navigation_status()
    assert response == NavigationStatusResponse(False, error_msg="failed to get target")


def test_status_failure():
    response = NavigationComponent(FakeNavigator(status=None)).get_navigation_status()
    assert response == NavigationStatusResponse(False, error_msg="failed to get status")


@pytest.mark.parametrize("status", list(NavigationStatus))
def test_status_passes_through(status):
    nav = FakeNavigator(target="lab", status=status)
    response = NavigationComponent(nav).get_navigation_status()
    assert response == NavigationStatusResponse(True, current_goal="lab", status=status)


def test_unknown_status_maps_to_error():
    nav = FakeNavigator(status="something odd")
    response = NavigationComponent(nav).get_navigation_status()
    assert response.is_ok is True
    assert response.status is NavigationStatus.ERROR


def test_stop_navigation():
    nav = FakeNavigator()
    assert NavigationComponent(nav).stop_navigation() == NavigationResponse(True)
    assert nav.stops == 1


def test_stop_navigation_failure():
    response = NavigationComponent(FakeNavigator(stop_ok=False)).stop_navigation()
    assert response == NavigationResponse(False, "failed to stop navigation")


def test_check_near_empty_poi():
    nav = FakeNavigator()
    response = NavigationComponent(nav).check_near_to_poi("", 1.0)
    assert response == NearToPoiResponse(False, error_msg="empty poi")
    assert nav.near_checks == []


def test_check_near_true():
    nav = FakeNavigator(near=True)
    response = NavigationComponent(nav).check_near_to_poi("lab", 1.5)
    assert response == NearToPoiResponse(True, is_near=True)
    assert nav.near_checks == [("lab", 1.5)]


def test_check_near_false():
    response = NavigationComponent(FakeNavigator(near=False)).check_near_to_poi("lab", 1.5)
    assert response == NearToPoiResponse(True, is_near=False, error_msg="failed to check if nearby")


def test_services_names_and_handlers():
    nav = FakeNavigator()
    services = NavigationComponent(nav).services()
    assert set(services) == {
        "/NavigationComponent/GoToPoiByName",
        "/NavigationComponent/GetNavigationStatus",
        "/NavigationComponent/StopNavigation",
        "/NavigationComponent/CheckNearToPoi",
    }
    assert services["/NavigationComponent/GoToPoiByName"]("lab").is_ok is True
    assert nav.goals == ["lab"]