from __future__ import annotations

import math
from typing import Tuple

Vector2 = Tuple[float, float]


def norm2(v: Vector2) -> float:
    return math.hypot(v[0], v[1])


def polar_angle(v: Vector2) -> float:
    """Angle of v from the +x axis, in (-pi, pi]."""
    return math.atan2(v[1], v[0])


def perifocal_to_ecliptic(
    x_p: float,
    y_p: float,
    argp_rad: float,
    inc_rad: float,
    node_rad: float,
) -> Vector2:
    """
    Rotate an in-plane perifocal point into the ecliptic frame and keep x, y.

    This is R3(node) * R1(inc) * R3(argp) applied to (x_p, y_p, 0), written
    out term by term; the z component (out of the ecliptic) is dropped.

    Args:
        x_p, y_p: perifocal coordinates (x toward perihelion)
        argp_rad: argument of perihelion (radians)
        inc_rad: inclination (radians)
        node_rad: longitude of ascending node (radians)
    """
    cw = math.cos(argp_rad)
    sw = math.sin(argp_rad)
    cO = math.cos(node_rad)
    sO = math.sin(node_rad)
    cI = math.cos(inc_rad)

    x = (cw * cO - sw * sO * cI) * x_p + (-sw * cO - cw * sO * cI) * y_p
    y = (cw * sO + sw * cO * cI) * x_p + (-sw * sO + cw * cO * cI) * y_p
    return (x, y)
