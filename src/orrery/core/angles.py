from __future__ import annotations

import math

TWO_PI: float = 2.0 * math.pi


def wrap_deg(angle_deg: float) -> float:
    """Wrap angle to [0, 360)."""
    if 0.0 <= angle_deg < 360.0:
        return angle_deg
    w = angle_deg % 360.0
    # x % 360 rounds up to 360.0 for tiny negative x
    if w >= 360.0:
        w = 0.0
    return w


def wrap_signed_deg(angle_deg: float) -> float:
    """Wrap angle to (-180, 180]."""
    # In-range values are returned untouched so the wrap is exactly idempotent
    if -180.0 < angle_deg <= 180.0:
        return angle_deg
    w = wrap_deg(angle_deg)
    if w > 180.0:
        w -= 360.0
    return w


def wrap_signed_rad(angle_rad: float) -> float:
    """Wrap angle to (-pi, pi]."""
    if -math.pi < angle_rad <= math.pi:
        return angle_rad
    w = angle_rad % TWO_PI
    if w >= TWO_PI:
        w = 0.0
    if w > math.pi:
        w -= TWO_PI
    return w
