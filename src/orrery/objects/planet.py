from __future__ import annotations

from dataclasses import dataclass

from orrery.physics.orbit import KeplerianElements, OsculatingElements, osculating_elements


@dataclass(frozen=True)
class Planet:
    """
    A body in the orrery: element set plus how it is drawn.
    Every planet uses the same record; inner/outer differences live in the
    elements' b, c, s, f terms.
    """
    name: str
    elements: KeplerianElements
    color: str
    radius_px: float = 4.0

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Planet name cannot be empty.")
        if self.radius_px <= 0:
            raise ValueError(f"Marker radius must be positive. Got: {self.radius_px}")

    def osculating_at(self, jd: float) -> OsculatingElements:
        return osculating_elements(self.elements, jd)
