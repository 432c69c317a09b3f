"""
Calendar <-> Julian Day conversion and Julian centuries since J2000.0.

All calendar dates are proleptic Gregorian at 0h UT. No leap seconds,
no time zones, no TT/UT distinction: the element table is only good to
a fraction of a degree anyway.
"""

from __future__ import annotations

import datetime as _dt
import math
from typing import Tuple

from orrery.core.constants import DAYS_PER_CENTURY, JD_J2000


def julian_day(year: int, month: int, day: int) -> float:
    """
    Gregorian calendar date -> Julian Day at 0h UT.

    Integer algorithm (Fliegel & Van Flandern); the result always ends in .5.
    Out-of-range month/day values are not checked.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    return jdn - 0.5


def julian_day_from_date(date: _dt.date) -> float:
    return julian_day(date.year, date.month, date.day)


def calendar_from_jd(jd: float) -> Tuple[int, int, float]:
    """
    Julian Day -> (year, month, day) in the proleptic Gregorian calendar.
    The day carries the fraction of the day elapsed since 0h UT.
    """
    shifted = jd + 0.5
    j = int(math.floor(shifted))
    frac = shifted - j

    f = j + 1401 + (((4 * j + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    g = (e % 1461) // 4
    h = 5 * g + 2
    day = (h % 153) // 5 + 1
    month = ((h // 153 + 2) % 12) + 1
    year = e // 1461 - 4716 + (12 + 2 - month) // 12
    return year, month, day + frac


def iso_date_from_jd(jd: float) -> str:
    """Calendar date of `jd` as YYYY-MM-DD (time of day dropped)."""
    year, month, day = calendar_from_jd(jd)
    return f"{year:04d}-{month:02d}-{int(day):02d}"


def centuries_since_j2000(jd: float) -> float:
    """T = (JD - 2451545.0) / 36525."""
    return (jd - JD_J2000) / DAYS_PER_CENTURY


def jd_from_centuries(T: float) -> float:
    return JD_J2000 + T * DAYS_PER_CENTURY
