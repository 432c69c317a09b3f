from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from orrery.objects.planet import Planet
from orrery.objects.solar_system import PLANETS


@dataclass
class Scenario:
    """
    Container for the bodies drawn in a scene.
    Keep this pure: just data + lookup. Insertion order is draw order.
    """
    name: str
    planets: Dict[str, Planet] = field(default_factory=dict)

    def add_planet(self, planet: Planet) -> None:
        if planet.name in self.planets:
            raise ValueError(f"Duplicate planet name: {planet.name}")
        self.planets[planet.name] = planet

    def planet_list(self) -> List[Planet]:
        return list(self.planets.values())

    def only(self, names: Iterable[str]) -> "Scenario":
        """
        Sub-scenario with the named planets (case-insensitive), keeping the
        declared order of this scenario rather than the order of `names`.
        """
        wanted = {n.strip().lower() for n in names}
        known = {p.name.lower() for p in self.planet_list()}
        missing = sorted(wanted - known)
        if missing:
            raise KeyError(f"Unknown planet(s) in scenario '{self.name}': {', '.join(missing)}")

        sub = Scenario(name=self.name)
        for planet in self.planet_list():
            if planet.name.lower() in wanted:
                sub.add_planet(planet)
        return sub


def default_scenario() -> Scenario:
    """Mercury to Neptune from the built-in element table."""
    scenario = Scenario(name="Solar System")
    for planet in PLANETS:
        scenario.add_planet(planet)
    return scenario
