# Two-body Kepler equation helpers

from __future__ import annotations

import math

from orrery.core.constants import KEPLER_ITERATIONS


def solve_eccentric_anomaly(M_rad: float, e: float, iterations: int = KEPLER_ITERATIONS) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)
    using Newton-Raphson with a fixed iteration budget.

    There is no convergence test and no error on poor convergence: the
    caller gets whatever `iterations` steps produce. For the planetary
    eccentricities in the element table (e < 0.25) and M already wrapped
    to (-pi, pi], 10 steps reach double precision.

    Args:
        M_rad: Mean anomaly (rad), expected in (-pi, pi]
        e: eccentricity (0 <= e < 1), not checked
        iterations: number of Newton steps

    Returns:
        E_rad: Eccentric anomaly (rad)
    """
    E = M_rad
    for _ in range(iterations):
        f = E - e * math.sin(E) - M_rad
        fp = 1.0 - e * math.cos(E)
        E = E - f / fp
    return E


def radius_at_true_anomaly(a: float, e: float, nu_rad: float) -> float:
    """Conic equation r = a(1 - e^2) / (1 + e cos v)."""
    return a * (1.0 - e * e) / (1.0 + e * math.cos(nu_rad))
