# src/orrery/physics/orbit.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from orrery.core.angles import wrap_deg, wrap_signed_deg, wrap_signed_rad
from orrery.core.constants import DEG2RAD
from orrery.core.frames import Vector2, perifocal_to_ecliptic
from orrery.core.timescales import centuries_since_j2000
from orrery.physics.kepler import radius_at_true_anomaly, solve_eccentric_anomaly


@dataclass(frozen=True)
class KeplerianElements:
    """
    Mean Keplerian elements at J2000.0 with their rates per Julian century.

    Units:
        a, a_rate: semi-major axis in AU (and AU/century)
        e, e_rate: eccentricity
        i_deg: inclination in degrees
        L_deg: mean longitude in degrees
        lon_peri_deg: longitude of perihelion in degrees
        node_deg: longitude of the ascending node in degrees
        b, c, s, f: extra mean-anomaly terms for Jupiter..Neptune (degrees),
            all zero for the inner planets

    Eccentricity must stay in [0, 1) over the time span used. This is a
    property of the table, not checked here.
    """
    a: float
    a_rate: float
    e: float
    e_rate: float
    i_deg: float
    i_rate: float
    L_deg: float
    L_rate: float
    lon_peri_deg: float
    lon_peri_rate: float
    node_deg: float
    node_rate: float
    b: float = 0.0
    c: float = 0.0
    s: float = 0.0
    f: float = 0.0

    @property
    def has_correction(self) -> bool:
        return self.b != 0.0 or self.c != 0.0 or self.s != 0.0 or self.f != 0.0


@dataclass(frozen=True)
class OsculatingElements:
    """Elements extrapolated to a given time T (Julian centuries from J2000)."""
    T: float
    a: float
    e: float
    i_deg: float
    L_deg: float
    lon_peri_deg: float
    node_deg: float

    @property
    def arg_peri_deg(self) -> float:
        return wrap_deg(self.lon_peri_deg - self.node_deg)

    @property
    def aphelion_au(self) -> float:
        return self.a * (1.0 + self.e)

    @property
    def perihelion_au(self) -> float:
        return self.a * (1.0 - self.e)


def osculating_elements(elements: KeplerianElements, jd: float) -> OsculatingElements:
    """Linear extrapolation of the elements to `jd`, angles wrapped to [0, 360)."""
    T = centuries_since_j2000(jd)
    return OsculatingElements(
        T=T,
        a=elements.a + elements.a_rate * T,
        e=elements.e + elements.e_rate * T,
        i_deg=wrap_deg(elements.i_deg + elements.i_rate * T),
        L_deg=wrap_deg(elements.L_deg + elements.L_rate * T),
        lon_peri_deg=wrap_deg(elements.lon_peri_deg + elements.lon_peri_rate * T),
        node_deg=wrap_deg(elements.node_deg + elements.node_rate * T),
    )


def mean_anomaly_deg(elements: KeplerianElements, osc: OsculatingElements) -> float:
    """
    M = L - lon_peri, plus b T^2 + c cos(f T) + s sin(f T) for the outer planets.

    f T is an angle in degrees; it is converted to radians only for the trig
    calls while b, c, s stay in degrees.
    """
    M = osc.L_deg - osc.lon_peri_deg
    if elements.has_correction:
        T = osc.T
        fT = elements.f * T * DEG2RAD
        M += elements.b * T * T + elements.c * math.cos(fT) + elements.s * math.sin(fT)
    return M


def orientation_rad(osc: OsculatingElements) -> Tuple[float, float, float]:
    """(argp, inc, node) in radians, the order perifocal_to_ecliptic expects."""
    return (osc.arg_peri_deg * DEG2RAD, osc.i_deg * DEG2RAD, osc.node_deg * DEG2RAD)


def position_au(elements: KeplerianElements, jd: float) -> Vector2:
    """
    Heliocentric ecliptic (x, y) in AU at Julian Day `jd`.
    Two-body Keplerian position from the time-varying mean elements.
    """
    osc = osculating_elements(elements, jd)
    a = osc.a
    e = osc.e

    M_deg = wrap_signed_deg(mean_anomaly_deg(elements, osc))
    M = wrap_signed_rad(M_deg * DEG2RAD)

    E = solve_eccentric_anomaly(M, e)

    # Position in the orbital plane, x toward perihelion
    x_p = a * (math.cos(E) - e)
    y_p = a * math.sqrt(1.0 - e * e) * math.sin(E)

    argp, inc, node = orientation_rad(osc)
    return perifocal_to_ecliptic(x_p, y_p, argp, inc, node)


def propagate(elements: KeplerianElements, jds: Sequence[float]) -> List[Tuple[float, Vector2]]:
    """
    Evaluate position_au across a list of Julian Days.
    Returns list of (jd, (x, y)).
    """
    out: List[Tuple[float, Vector2]] = []
    for jd in jds:
        out.append((jd, position_au(elements, jd)))
    return out


def orbit_outline_au(osc: OsculatingElements, samples: int = 720) -> List[Vector2]:
    """
    Trace the osculating ellipse `osc` in the ecliptic plane.

    Returns samples + 1 points over true anomaly 0..2pi; the last point
    closes the loop. The orientation is held fixed at `osc`, so this is the
    instantaneous ellipse, not the slowly precessing path.
    """
    argp, inc, node = orientation_rad(osc)
    points: List[Vector2] = []
    for k in range(samples + 1):
        nu = 2.0 * math.pi * k / samples
        r = radius_at_true_anomaly(osc.a, osc.e, nu)
        points.append(perifocal_to_ecliptic(r * math.cos(nu), r * math.sin(nu), argp, inc, node))
    return points
