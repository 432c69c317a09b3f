from __future__ import annotations

import datetime as _dt
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from orrery.core.constants import RMAX_PADDING
from orrery.core.frames import Vector2
from orrery.core.timescales import julian_day, julian_day_from_date
from orrery.objects.planet import Planet
from orrery.physics.log_radial import map_log_radial, to_screen
from orrery.physics.orbit import KeplerianElements, orbit_outline_au, osculating_elements, propagate
from orrery.simulation.scenario import Scenario, default_scenario

log = logging.getLogger(__name__)

CalendarDate = Union[_dt.date, Tuple[int, int, int]]


@dataclass(frozen=True)
class SceneConfig:
    """
    Layout and sampling parameters for one scene.

    Units:
        view_half: half-width of the square canvas (drawing units)
        r_px_max: radius that r_max_au maps to after the log transform
        step_days: keyframe sampling step (smaller = smoother, bigger output)
        dur_seconds: duration of one animation loop
        orbit_samples: true-anomaly steps per orbit outline (one extra
            point closes the loop)
        rmax_padding: factor applied to the largest aphelion
    """
    view_half: float = 500.0
    r_px_max: float = 470.0
    step_days: float = 2.0
    dur_seconds: float = 60.0
    orbit_samples: int = 720
    rmax_padding: float = RMAX_PADDING

    def __post_init__(self):
        for name in ("view_half", "r_px_max", "step_days", "dur_seconds"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"{name} must be positive and finite. Got: {value}")
        if self.orbit_samples < 3:
            raise ValueError(f"orbit_samples must be >= 3. Got: {self.orbit_samples}")
        if not (math.isfinite(self.rmax_padding) and self.rmax_padding >= 1.0):
            raise ValueError(f"rmax_padding must be >= 1 and finite. Got: {self.rmax_padding}")


@dataclass(frozen=True)
class TimeSpan:
    """Closed interval of Julian Days [start_jd, end_jd]."""
    start_jd: float
    end_jd: float

    def __post_init__(self):
        if not (math.isfinite(self.start_jd) and math.isfinite(self.end_jd)):
            raise ValueError("Time span bounds must be finite.")
        if self.end_jd < self.start_jd:
            raise ValueError("end_jd must be >= start_jd.")

    @classmethod
    def from_dates(cls, start: CalendarDate, end: CalendarDate) -> "TimeSpan":
        return cls(start_jd=_to_jd(start), end_jd=_to_jd(end))

    @property
    def midpoint_jd(self) -> float:
        return 0.5 * (self.start_jd + self.end_jd)

    @property
    def duration_days(self) -> float:
        return self.end_jd - self.start_jd


def _to_jd(date: CalendarDate) -> float:
    if isinstance(date, _dt.date):
        return julian_day_from_date(date)
    year, month, day = date
    return julian_day(year, month, day)


@dataclass
class BodyTrack:
    """
    Drawable output for one planet, in screen coordinates (y down).
    xs[i], ys[i] is the marker position at Scene.times_jd[i].
    """
    name: str
    color: str
    radius_px: float
    outline_px: List[Vector2] = field(default_factory=list)
    xs: List[float] = field(default_factory=list)
    ys: List[float] = field(default_factory=list)

    @property
    def start_px(self) -> Vector2:
        """Marker position at the start of the span (first animation frame)."""
        return (self.xs[0], self.ys[0])


@dataclass
class Scene:
    """
    Everything a serializer needs. Keep it simple and serializable.
    """
    span: TimeSpan
    config: SceneConfig
    r_max_au: float
    times_jd: List[float] = field(default_factory=list)
    bodies: List[BodyTrack] = field(default_factory=list)


def keyframe_times(span: TimeSpan, step_days: float) -> List[float]:
    """
    Sample times from start to end at a fixed step, end inclusive.

    floor(duration / step) + 1 samples; the last one is pinned to end_jd
    even when the step does not divide the span. A span shorter than one
    step gives the single sample start_jd.
    """
    if step_days <= 0:
        raise ValueError("step_days must be positive.")

    # tolerance: 0.3 / 0.1 evaluates to 2.9999999999999996
    n = int(math.floor(span.duration_days / step_days + 1e-9)) + 1
    times = [span.start_jd + k * step_days for k in range(n)]
    if n > 1:
        times[-1] = span.end_jd
    return times


def compute_rmax_au(planets: Sequence[Planet], jd: float, padding: float = RMAX_PADDING) -> float:
    """Largest aphelion a(1+e) over `planets` at `jd`, times `padding`."""
    if not planets:
        raise ValueError("Cannot scale a scene with no planets.")
    return max(p.osculating_at(jd).aphelion_au for p in planets) * padding


def orbit_outline_px(
    elements: KeplerianElements,
    jd_mid: float,
    r_max_au: float,
    config: SceneConfig,
) -> List[Vector2]:
    """Closed outline of the osculating ellipse at jd_mid, in screen coordinates."""
    osc = osculating_elements(elements, jd_mid)
    out: List[Vector2] = []
    for x_au, y_au in orbit_outline_au(osc, config.orbit_samples):
        out.append(to_screen(*map_log_radial(x_au, y_au, r_max_au, config.r_px_max)))
    return out


def keyframes_px(
    elements: KeplerianElements,
    times_jd: Sequence[float],
    r_max_au: float,
    config: SceneConfig,
) -> Tuple[List[float], List[float]]:
    """Marker x and y keyframe sequences in screen coordinates."""
    xs: List[float] = []
    ys: List[float] = []
    for _jd, (x_au, y_au) in propagate(elements, times_jd):
        x, y = to_screen(*map_log_radial(x_au, y_au, r_max_au, config.r_px_max))
        xs.append(x)
        ys.append(y)
    return xs, ys


def build_scene(
    span: TimeSpan,
    config: Optional[SceneConfig] = None,
    scenario: Optional[Scenario] = None,
) -> Scene:
    """
    Assemble orbit outlines and animation keyframes for every planet.
    Deterministic: same span + config + scenario => same scene.
    """
    config = config or SceneConfig()
    scenario = scenario or default_scenario()
    planets = scenario.planet_list()

    jd_mid = span.midpoint_jd
    r_max_au = compute_rmax_au(planets, jd_mid, config.rmax_padding)
    times = keyframe_times(span, config.step_days)
    log.debug("Scene '%s': %d planets, %d keyframes, r_max_au=%.4f",
              scenario.name, len(planets), len(times), r_max_au)

    scene = Scene(span=span, config=config, r_max_au=r_max_au, times_jd=times)
    for planet in planets:
        xs, ys = keyframes_px(planet.elements, times, r_max_au, config)
        scene.bodies.append(BodyTrack(
            name=planet.name,
            color=planet.color,
            radius_px=planet.radius_px,
            outline_px=orbit_outline_px(planet.elements, jd_mid, r_max_au, config),
            xs=xs,
            ys=ys,
        ))
        log.debug("%s: start at (%.1f, %.1f)", planet.name, xs[0], ys[0])

    return scene
