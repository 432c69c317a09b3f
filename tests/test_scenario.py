import pytest

from orrery.objects.planet import Planet
from orrery.objects.solar_system import PLANETS
from orrery.simulation.scenario import Scenario, default_scenario


@pytest.fixture
def earth():
    return next(p for p in PLANETS if p.name == "Earth")


class TestScenario:
    def test_scenario_creation(self):
        scenario = Scenario(name="Test Scenario")
        assert scenario.name == "Test Scenario"
        assert len(scenario.planets) == 0

    def test_add_planet(self, earth):
        scenario = Scenario(name="Test")
        scenario.add_planet(earth)
        assert scenario.planets["Earth"] == earth

    def test_duplicate_rejected(self, earth):
        scenario = Scenario(name="Test")
        scenario.add_planet(earth)
        with pytest.raises(ValueError, match="Duplicate planet name: Earth"):
            scenario.add_planet(earth)

    def test_default_scenario_order(self):
        names = [p.name for p in default_scenario().planet_list()]
        assert names == ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"]

    def test_only_keeps_declared_order(self):
        sub = default_scenario().only(["neptune", "EARTH", " Mars "])
        assert [p.name for p in sub.planet_list()] == ["Earth", "Mars", "Neptune"]

    def test_only_rejects_unknown(self):
        with pytest.raises(KeyError, match="pluto"):
            default_scenario().only(["Earth", "Pluto"])


class TestPlanet:
    def test_name_required(self, earth):
        with pytest.raises(ValueError, match="Planet name cannot be empty"):
            Planet(name="  ", elements=earth.elements, color="#fff")

    def test_radius_positive(self, earth):
        with pytest.raises(ValueError, match="Marker radius must be positive"):
            Planet(name="X", elements=earth.elements, color="#fff", radius_px=0.0)

    def test_osculating_at(self, earth):
        osc = earth.osculating_at(2451545.0)
        assert osc.a == earth.elements.a


def test_table_eccentricities_are_elliptic():
    for planet in PLANETS:
        assert 0.0 <= planet.elements.e < 0.25


def test_only_outer_planets_carry_corrections():
    flags = {p.name: p.elements.has_correction for p in PLANETS}
    assert flags == {
        "Mercury": False, "Venus": False, "Earth": False, "Mars": False,
        "Jupiter": True, "Saturn": True, "Uranus": True, "Neptune": True,
    }
