"""
Logarithmic radial compression for drawing the whole planetary system on
one canvas.

The polar angle of a point is kept, its distance from the Sun is remapped:

    r_px = ln(1 + r) / ln(1 + r_max_au) * r_px_max

so that r_max_au lands exactly on r_px_max. Mercury at 0.4 AU and Neptune
at 30 AU then both get a usable share of the radius.
"""

from __future__ import annotations

import math

from orrery.core.constants import ORIGIN_EPS_AU
from orrery.core.frames import Vector2, norm2, polar_angle


def map_log_radial(x_au: float, y_au: float, r_max_au: float, r_px_max: float) -> Vector2:
    """
    Map a heliocentric point in AU to drawing units.

    Points within 1e-12 AU of the origin map to (0, 0). Radii beyond
    r_max_au map beyond r_px_max (no clamping).
    """
    r = norm2((x_au, y_au))
    if r <= ORIGIN_EPS_AU:
        return (0.0, 0.0)

    r_norm = math.log1p(r) / math.log1p(r_max_au)
    r_px = r_norm * r_px_max
    theta = polar_angle((x_au, y_au))
    return (r_px * math.cos(theta), r_px * math.sin(theta))


def to_screen(x_px: float, y_px: float) -> Vector2:
    """Flip y: the ecliptic y axis points up, screen y points down."""
    return (x_px, -y_px)
