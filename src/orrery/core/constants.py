from __future__ import annotations

import math

DEG2RAD: float = math.pi / 180.0

# J2000.0 epoch (2000-01-01 12:00 TT) as a Julian Day
JD_J2000: float = 2451545.0

# Days in a Julian century
DAYS_PER_CENTURY: float = 36525.0

# Radii at or below this (AU) are treated as the origin by the log mapper
ORIGIN_EPS_AU: float = 1e-12

# Newton iterations used by the Kepler solver (fixed budget)
KEPLER_ITERATIONS: int = 10

# Safety factor applied to the largest aphelion when scaling the scene
RMAX_PADDING: float = 1.03
